from taskq.domain.search import format_results, format_todo, search
from taskq.domain.todos import TodoStore


def _sample_store() -> TodoStore:
    store = TodoStore()
    store.add("buy bread", ["groceries"])
    store.add("buy milk", ["groceries"])
    store.add("call parents", ["relatives"])
    return store


def _ids(todos):
    return [t.id for t in todos]


def test_search_by_tag_newest_first():
    store = _sample_store()
    assert _ids(search(store, [], {"groceries"})) == [1, 0]


def test_search_by_word():
    store = _sample_store()
    assert _ids(search(store, ["buy"], set())) == [1, 0]


def test_search_subsequence_word():
    store = _sample_store()
    # "call", "parents" and "bread" hold an "a"; "buy" and "milk" do not
    assert _ids(search(store, ["a"], set())) == [2, 0]
    assert _ids(search(store, ["prnts"], set())) == [2]


def test_search_all_words_must_match():
    store = _sample_store()
    assert _ids(search(store, ["buy", "mk"], set())) == [1]
    assert _ids(search(store, ["buy", "parents"], set())) == []


def test_search_word_must_fit_inside_one_word():
    store = _sample_store()
    # "cp" spans "call parents" but no single word
    assert _ids(search(store, ["cp"], set())) == []


def test_search_tags_any_of():
    store = _sample_store()
    assert _ids(search(store, [], {"relatives", "groceries"})) == [2, 1, 0]
    assert _ids(search(store, [], {"work"})) == []


def test_search_words_and_tags():
    store = _sample_store()
    assert _ids(search(store, ["a"], {"groceries"})) == [0]


def test_empty_query_returns_everything():
    store = _sample_store()
    assert _ids(search(store, [], set())) == [2, 1, 0]


def test_completed_todos_are_returned():
    store = _sample_store()
    store.mark_done(0)
    assert _ids(search(store, ["a"], set())) == [2, 0]


def test_search_is_idempotent():
    store = _sample_store()
    first = format_results(t.to_dict() for t in search(store, ["b"], set()))
    second = format_results(t.to_dict() for t in search(store, ["b"], set()))
    assert first == second


def test_format_todo():
    assert format_todo({"id": 1, "description": "buy milk", "tags": ["groceries", "urgent"]}) == (
        '1 "buy milk" #groceries #urgent'
    )
    assert format_todo({"id": 0, "description": "no tags", "tags": []}) == '0 "no tags"'


def test_format_results():
    store = _sample_store()
    lines = format_results(t.to_dict() for t in search(store, [], {"groceries"}))
    assert lines == [
        "2 item(s) found",
        '1 "buy milk" #groceries',
        '0 "buy bread" #groceries',
    ]
    assert format_results([]) == ["0 item(s) found"]
