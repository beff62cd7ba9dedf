"""
Unit tests for display ordering
"""
from datetime import date

from todo_panes import TodoItem, compare_todos, sort_todos


def todo(name, action_date=None, someday=False):
    return TodoItem(description=name, action_date=action_date, is_someday_maybe_note=someday)


class TestCompareTodos:
    def setup_method(self):
        self.dated = todo("dated", date(2024, 1, 1))
        self.someday = todo("someday", someday=True)
        self.inbox = todo("inbox")

    def test_undated_someday_before_undated(self):
        assert compare_todos(self.someday, self.inbox) == -1
        assert compare_todos(self.inbox, self.someday) == 1

    def test_undated_same_flag_equal(self):
        assert compare_todos(self.inbox, todo("other")) == 0
        assert compare_todos(self.someday, todo("other", someday=True)) == 0

    def test_one_side_undated_is_equal(self):
        """A missing date against a present one does not fall back to the someday rule"""
        assert compare_todos(self.dated, self.someday) == 0
        assert compare_todos(self.someday, self.dated) == 0
        assert compare_todos(self.dated, self.inbox) == 0
        assert compare_todos(self.inbox, self.dated) == 0

    def test_chronological(self):
        later = todo("later", date(2024, 3, 1))
        assert compare_todos(self.dated, later) == -1
        assert compare_todos(later, self.dated) == 1
        assert compare_todos(self.dated, todo("same day", date(2024, 1, 1))) == 0

    def test_someday_flag_ignored_between_dated(self):
        a = todo("a", date(2024, 5, 1), someday=True)
        b = todo("b", date(2024, 4, 1))
        assert compare_todos(a, b) == 1


class TestSortTodos:
    def test_dates_ascending(self):
        items = [todo("c", date(2024, 3, 1)), todo("a", date(2024, 1, 1)), todo("b", date(2024, 2, 1))]
        assert [t.description for t in sort_todos(items)] == ["a", "b", "c"]

    def test_undated_someday_first(self):
        items = [todo("inbox-1"), todo("someday-1", someday=True), todo("inbox-2"), todo("someday-2", someday=True)]
        assert [t.description for t in sort_todos(items)] == ["someday-1", "someday-2", "inbox-1", "inbox-2"]

    def test_stable_for_equal_items(self):
        items = [todo("first", date(2024, 1, 1)), todo("second", date(2024, 1, 1)), todo("third", date(2024, 1, 1))]
        assert [t.description for t in sort_todos(items)] == ["first", "second", "third"]

    def test_idempotent(self):
        items = [todo("c", date(2024, 3, 1)), todo("a", date(2024, 1, 1)), todo("b", date(2024, 1, 1))]
        once = sort_todos(items)
        assert sort_todos(once) == once

    def test_input_not_mutated(self):
        items = [todo("b", date(2024, 2, 1)), todo("a", date(2024, 1, 1))]
        sort_todos(items)
        assert [t.description for t in items] == ["b", "a"]

    def test_mixed_dated_and_undated_order(self):
        """The dated item compares equal to both undated ones, so it keeps its place"""
        items = [todo("dated", date(2024, 1, 1)), todo("someday", someday=True), todo("inbox")]
        assert [t.description for t in sort_todos(items)] == ["dated", "someday", "inbox"]
