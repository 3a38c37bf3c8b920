from __future__ import annotations

from typing import List, Optional

import pytest

from vi_core.buffer import Characters, Lines, RegisterManager, SystemClipboard
from vi_core.buffer.registers import merge


class FakeClipboard(SystemClipboard):
    def __init__(self, text: Optional[str] = None) -> None:
        super().__init__(copy_chain=(), paste_chain=())
        self.text = text
        self.writes: List[str] = []

    def write(self, text: str) -> bool:
        self.text = text
        self.writes.append(text)
        return True

    def read(self) -> Optional[str]:
        return self.text


def make_registers(clipboard: Optional[FakeClipboard] = None) -> RegisterManager:
    return RegisterManager(clipboard=clipboard or FakeClipboard())


@pytest.mark.parametrize(
    ("existing", "incoming", "expected"),
    [
        (Characters("a"), Characters("b"), Characters("ab")),
        (Lines(["a"]), Lines(["b"]), Lines(["a", "b"])),
        (Characters("a"), Lines(["b", "c"]), Lines(["a", "b", "c"])),
        (Lines(["a", "b"]), Characters("c"), Lines(["a", "b", "c"])),
    ],
)
def test_merge_promotion_table(existing, incoming, expected) -> None:
    assert merge(existing, incoming) == expected


def test_unnamed_register_starts_empty() -> None:
    registers = make_registers()

    assert registers.get('"') == Characters("")


def test_set_mirrors_into_unnamed() -> None:
    registers = make_registers()

    registers.set("a", Characters("hello"))

    assert registers.get("a") == Characters("hello")
    assert registers.unnamed == Characters("hello")
    assert registers.put_register() == Characters("hello")


def test_append_merges_and_mirrors() -> None:
    registers = make_registers()
    registers.set("a", Characters("foo"))

    registers.append("a", Lines(["bar"]))

    assert registers.get("a") == Lines(["foo", "bar"])
    assert registers.unnamed == Lines(["foo", "bar"])


def test_append_to_empty_register_behaves_as_set() -> None:
    registers = make_registers()

    registers.append("b", Characters("x"))

    assert registers.get("b") == Characters("x")


def test_invalid_names_are_ignored() -> None:
    registers = make_registers()

    registers.set("?", Characters("nope"))
    registers.append("ab", Characters("nope"))

    assert registers.get("?") is None
    assert registers.get("ab") is None
    assert registers.unnamed == Characters("")


def test_unset_valid_register_reads_none() -> None:
    assert make_registers().get("z") is None


def test_clipboard_registers_proxy_without_touching_unnamed() -> None:
    clipboard = FakeClipboard()
    registers = make_registers(clipboard)

    registers.set("+", Lines(["one", "two"]))

    assert clipboard.text == "one\ntwo"
    assert registers.get("*") == Characters("one\ntwo")
    assert registers.unnamed == Characters("")


def test_clipboard_append_concatenates_text() -> None:
    clipboard = FakeClipboard("abc")
    registers = make_registers(clipboard)

    registers.append("*", Characters("def"))

    assert clipboard.text == "abcdef"


def test_clipboard_unavailable_reads_none() -> None:
    registers = RegisterManager(clipboard=SystemClipboard(enabled=False))

    registers.set("+", Characters("lost"))

    assert registers.get("+") is None


def test_uppercase_name_appends_and_reads_lowercase_register() -> None:
    registers = make_registers()
    registers.set("a", Characters("foo"))

    registers.set("A", Characters("bar"))

    assert registers.get("a") == Characters("foobar")
    assert registers.get("A") == Characters("foobar")
    assert registers.unnamed == Characters("foobar")
