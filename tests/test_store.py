from dsakit.store import Store, StoreItem, main


def test_item_equality_is_case_sensitive():
    assert not StoreItem("Apple").equals(StoreItem("apple"))


def test_item_equals_same_name():
    assert StoreItem("Apple").equals(StoreItem("Apple"))


def test_item_default_name_is_empty():
    assert StoreItem().name == ""
    assert StoreItem().equals(StoreItem(""))


def test_item_str():
    assert str(StoreItem("Apple")) == "Item name: Apple"


def test_store_keeps_insertion_order():
    store = Store("Test Store")
    store.add_item(StoreItem("Apple"))
    store.add_item(StoreItem("Banana"))
    assert len(store) == 2
    assert [item.name for item in store] == ["Apple", "Banana"]


def test_empty_store():
    store = Store()
    assert len(store) == 0
    assert str(store) == "Store: \n----------------"


def test_store_str():
    store = Store("Test Store")
    store.add_item(StoreItem("Apple"))
    store.add_item(StoreItem("Banana"))
    assert str(store) == (
        "Store: Test Store\n----------------\nItem name: Apple\nItem name: Banana"
    )


def test_stores_do_not_share_items():
    first = Store("a")
    second = Store("b")
    first.add_item(StoreItem("Apple"))
    assert len(second) == 0


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Store: Test Store",
        "----------------",
        "Item name: Apple",
        "Item name: Banana",
    ]