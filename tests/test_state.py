from datetime import date, datetime, timedelta

from expense_tracker import state as transitions
from expense_tracker.models import ALL_CATEGORIES, CATEGORIES, SORT_HIGHEST, SORT_NEWEST

TODAY = date(2026, 10, 19)


def _today():
    return TODAY


def _ticking_clock(start=datetime(2026, 10, 19, 9, 0)):
    ticks = {'n': 0}

    def now():
        ticks['n'] += 1
        return start + timedelta(seconds=ticks['n'])
    return now


def _add(tracker, description, amount, category='Food', when=None, now=None):
    tracker = transitions.update_transaction_draft(
        tracker,
        description=description,
        amount=amount,
        category=category,
        date=when or TODAY,
    )
    return transitions.add_transaction(tracker, now=now or _ticking_clock(), today=_today)


def test_new_state_defaults():
    tracker = transitions.new_state(today=_today)
    assert tracker.overall_budget == 0
    assert tracker.category_budgets == {category: 0.0 for category in CATEGORIES}
    assert tracker.transactions == ()
    assert tracker.filter_category == ALL_CATEGORIES
    assert tracker.sort_key == SORT_NEWEST
    assert tracker.category_draft == 'Food'
    assert tracker.date_draft == TODAY


def test_set_budget_accepts_positive_and_clears_draft():
    tracker = transitions.set_budget_draft(transitions.new_state(today=_today), '1000')
    result = transitions.set_budget(tracker)
    assert result.overall_budget == 1000.0
    assert result.budget_draft == ''


def test_set_budget_rejects_invalid_and_keeps_draft():
    start = transitions.set_budget(
        transitions.set_budget_draft(transitions.new_state(today=_today), '500')
    )
    for draft in ['', 'abc', '0', '-20', 'nan']:
        tracker = transitions.set_budget_draft(start, draft)
        result = transitions.set_budget(tracker)
        assert result is tracker
        assert result.overall_budget == 500.0
        assert result.budget_draft == draft


def test_set_category_budget_substitutes_zero_for_bad_input():
    tracker = transitions.new_state(today=_today)
    tracker = transitions.set_category_budget(tracker, 'Food', '300')
    assert tracker.category_budgets['Food'] == 300.0

    tracker = transitions.set_category_budget(tracker, 'Food', 'lots')
    assert tracker.category_budgets['Food'] == 0.0

    tracker = transitions.set_category_budget(tracker, 'Transport', '-5')
    assert tracker.category_budgets['Transport'] == 0.0


def test_set_category_budget_has_no_upper_bound():
    tracker = transitions.set_budget(
        transitions.set_budget_draft(transitions.new_state(today=_today), '100')
    )
    tracker = transitions.set_category_budget(tracker, 'Utilities', '5000')
    assert tracker.category_budgets['Utilities'] == 5000.0


def test_set_category_budget_ignores_unknown_category():
    tracker = transitions.new_state(today=_today)
    assert transitions.set_category_budget(tracker, 'Rent', '100') is tracker


def test_add_transaction_appends_and_resets_drafts():
    tracker = transitions.new_state(today=_today)
    tracker = _add(tracker, 'Cinema', '350', category='Entertainment', when=date(2026, 10, 1))

    assert len(tracker.transactions) == 1
    added = tracker.transactions[0]
    assert added.description == 'Cinema'
    assert added.amount == 350.0
    assert added.category == 'Entertainment'
    assert added.date == date(2026, 10, 1)
    assert tracker.description_draft == ''
    assert tracker.amount_draft == ''
    assert tracker.date_draft == TODAY
    # category draft is retained
    assert tracker.category_draft == 'Entertainment'


def test_add_transaction_rejects_invalid_drafts():
    tracker = transitions.new_state(today=_today)
    for description, amount in [('', '100'), ('Bus', '0'), ('Bus', '-3'), ('Bus', 'ten'), ('Bus', '')]:
        drafted = transitions.update_transaction_draft(tracker, description=description, amount=amount)
        result = transitions.add_transaction(drafted, now=_ticking_clock(), today=_today)
        assert result is drafted
        assert result.transactions == ()
        assert result.description_draft == description
        assert result.amount_draft == amount


def test_add_transaction_accepts_whitespace_description():
    tracker = _add(transitions.new_state(today=_today), '   ', '100')
    assert len(tracker.transactions) == 1
    assert tracker.transactions[0].description == '   '


def test_add_transaction_does_not_check_budgets():
    tracker = transitions.set_category_budget(transitions.new_state(today=_today), 'Food', '10')
    tracker = _add(tracker, 'Feast', '999')
    assert len(tracker.transactions) == 1


def test_identifiers_unique_with_frozen_clock():
    frozen = datetime(2026, 10, 19, 12, 0)
    tracker = transitions.new_state(today=_today)
    for n in range(5):
        tracker = _add(tracker, f'Item {n}', '10', now=lambda: frozen)

    ids = [t.id for t in tracker.transactions]
    assert len(set(ids)) == 5


def test_identifiers_not_reused_after_delete():
    tracker = transitions.new_state(today=_today)
    tracker = _add(tracker, 'A', '1')
    tracker = _add(tracker, 'B', '2')
    last_id = tracker.transactions[-1].id
    tracker = transitions.delete_transaction(tracker, last_id)
    tracker = _add(tracker, 'C', '3')
    assert tracker.transactions[-1].id != last_id


def test_size_and_total_after_many_adds():
    amounts = ['12.5', '40', '7.25', '100', '0.1', '0.2']
    tracker = transitions.new_state(today=_today)
    clock = _ticking_clock()
    for n, amount in enumerate(amounts):
        tracker = _add(tracker, f'Item {n}', amount, now=clock)

    assert len(tracker.transactions) == len(amounts)
    total = sum(t.amount for t in tracker.transactions)
    assert abs(total - sum(float(a) for a in amounts)) < 1e-9


def test_delete_transaction():
    tracker = transitions.new_state(today=_today)
    clock = _ticking_clock()
    tracker = _add(tracker, 'A', '1', now=clock)
    tracker = _add(tracker, 'B', '2', now=clock)

    unchanged = transitions.delete_transaction(tracker, 999)
    assert unchanged is tracker

    target = tracker.transactions[0].id
    result = transitions.delete_transaction(tracker, target)
    assert len(result.transactions) == 1
    assert target not in [t.id for t in result.transactions]


def test_update_transaction_draft_ignores_unknown_category():
    tracker = transitions.new_state(today=_today)
    result = transitions.update_transaction_draft(tracker, category='Rent')
    assert result.category_draft == 'Food'


def test_filter_and_sort_transitions():
    tracker = transitions.new_state(today=_today)
    tracker = transitions.set_filter(tracker, 'Transport')
    tracker = transitions.set_sort(tracker, SORT_HIGHEST)
    assert tracker.filter_category == 'Transport'
    assert tracker.sort_key == SORT_HIGHEST

    assert transitions.set_filter(tracker, 'Rent') is tracker
    assert transitions.set_sort(tracker, 'Alphabetical') is tracker


def test_transitions_leave_previous_state_untouched():
    before = transitions.new_state(today=_today)
    after = _add(transitions.set_category_budget(before, 'Food', '50'), 'Lunch', '20')
    assert before.transactions == ()
    assert before.category_budgets['Food'] == 0.0
    assert after.category_budgets['Food'] == 50.0
