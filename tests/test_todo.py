import pytest

from hermeskit.todo import Item, Tab, TodoList


def make_list(*texts):
    todo = TodoList()
    for text in texts:
        todo.add(text)
    return todo


def test_add_appends_active_items_in_order():
    todo = make_list("milk", "bread")
    assert [item.text for item in todo.items] == ["milk", "bread"]
    assert all(not item.completed for item in todo.items)


def test_add_returns_the_new_item():
    todo = TodoList()
    item = todo.add("walk")
    assert item is todo.items[-1]
    assert item == Item("walk", False)


def test_add_on_completed_tab_switches_to_all():
    todo = TodoList(tab=Tab.COMPLETED)
    todo.add("task")
    assert todo.tab is Tab.ALL


def test_add_on_active_tab_keeps_tab():
    todo = TodoList(tab=Tab.ACTIVE)
    todo.add("task")
    assert todo.tab is Tab.ACTIVE


def test_toggle_flips_and_returns_state():
    todo = make_list("a")
    assert todo.toggle(0) is True
    assert todo.items[0].completed
    assert todo.toggle(0) is False
    assert not todo.items[0].completed


def test_visible_filters_by_tab():
    todo = make_list("a", "b", "c")
    todo.toggle(1)
    assert [i for i, _ in todo.visible(Tab.ALL)] == [0, 1, 2]
    assert [i for i, _ in todo.visible(Tab.ACTIVE)] == [0, 2]
    assert [i for i, _ in todo.visible(Tab.COMPLETED)] == [1]


def test_visible_defaults_to_current_tab():
    todo = make_list("a", "b")
    todo.toggle(0)
    todo.tab = Tab.ACTIVE
    assert todo.visible() == [(1, todo.items[1])]


def test_tabs_partition_all_items():
    todo = make_list("a", "b", "c", "d")
    todo.toggle(0)
    todo.toggle(3)
    active = {i for i, _ in todo.visible(Tab.ACTIVE)}
    done = {i for i, _ in todo.visible(Tab.COMPLETED)}
    assert active | done == {i for i, _ in todo.visible(Tab.ALL)}
    assert not active & done


def test_take_for_edit_removes_and_returns_text():
    todo = make_list("a", "b", "c")
    assert todo.take_for_edit(1) == "b"
    assert [item.text for item in todo.items] == ["a", "c"]


def test_edit_round_trip_moves_item_to_end():
    todo = make_list("a", "b")
    text = todo.take_for_edit(0)
    todo.add(text)
    assert [item.text for item in todo.items] == ["b", "a"]


@pytest.mark.parametrize("index", [-1, 3])
def test_bad_index_raises(index):
    todo = make_list("a", "b", "c")
    with pytest.raises(IndexError):
        todo.toggle(index)
    with pytest.raises(IndexError):
        todo.take_for_edit(index)
    assert len(todo.items) == 3