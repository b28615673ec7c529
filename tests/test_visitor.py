"""Tests for visitor models and name normalization."""
import dataclasses

import pytest

from treehouse.models import ActionKind, Visitor, VisitorAction, normalize_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Bert\n", "bert"),
        ("STEVE\r\n", "steve"),
        ("\tWilma Flintstone  \n", "wilma flintstone"),
        ("\n", ""),
        ("   ", ""),
        ("", ""),
    ],
)
def test_normalize_name(raw, expected):
    assert normalize_name(raw) == expected


def test_normalize_name_keeps_punctuation():
    assert normalize_name(" O'Brien-Smith. \n") == "o'brien-smith."


def test_visitor_lowercases_name():
    visitor = Visitor("Bert", "Hello", VisitorAction.accept(), 45)
    assert visitor.name == "bert"


def test_visitor_is_immutable():
    visitor = Visitor("fred", "Wow", VisitorAction.refuse(), 30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        visitor.age = 31


@pytest.mark.parametrize("age", [-129, 128, 1000])
def test_visitor_rejects_age_out_of_range(age):
    with pytest.raises(ValueError, match="age must be between"):
        Visitor("bert", "Hello", VisitorAction.accept(), age)


@pytest.mark.parametrize("age", [-128, 0, 127])
def test_visitor_accepts_age_bounds(age):
    assert Visitor("bert", "Hello", VisitorAction.accept(), age).age == age


def test_newcomer_is_on_probation():
    visitor = Visitor.newcomer("wilma")
    assert visitor.name == "wilma"
    assert visitor.greeting == "New friend"
    assert visitor.action == VisitorAction.probation()
    assert visitor.age == 0


def test_action_factories_set_discriminant():
    assert VisitorAction.accept().kind is ActionKind.ACCEPT
    assert VisitorAction.probation().kind is ActionKind.PROBATION
    assert VisitorAction.refuse().kind is ActionKind.REFUSE

    with_note = VisitorAction.accept_with_note("Milk in the fridge")
    assert with_note.kind is ActionKind.ACCEPT_WITH_NOTE
    assert with_note.note == "Milk in the fridge"


def test_accept_with_note_requires_note():
    with pytest.raises(ValueError, match="requires a note"):
        VisitorAction(ActionKind.ACCEPT_WITH_NOTE)


def test_note_rejected_on_other_actions():
    with pytest.raises(ValueError, match="does not take a note"):
        VisitorAction(ActionKind.REFUSE, note="go away")


def test_visitor_from_dict_inline_action():
    visitor = Visitor.from_dict({
        "name": "Steve",
        "greeting": "Hi Steve.",
        "action": "accept_with_note",
        "note": "Lactose-free milk is in the fridge",
        "age": 15,
    })

    assert visitor.name == "steve"
    assert visitor.action == VisitorAction.accept_with_note("Lactose-free milk is in the fridge")
    assert visitor.age == 15


def test_visitor_from_dict_nested_action_and_default_age():
    visitor = Visitor.from_dict({
        "name": "fred",
        "greeting": "Wow, who invited Fred?",
        "action": {"kind": "refuse"},
    })

    assert visitor.action == VisitorAction.refuse()
    assert visitor.age == 0


def test_visitor_from_dict_unknown_action():
    with pytest.raises(ValueError):
        Visitor.from_dict({"name": "x", "greeting": "y", "action": "banish"})


def test_visitor_to_dict():
    visitor = Visitor("Steve", "Hi", VisitorAction.accept_with_note("milk"), 15)
    assert visitor.to_dict() == {
        "name": "steve",
        "greeting": "Hi",
        "action": {"kind": "accept_with_note", "note": "milk"},
        "age": 15,
    }


def test_visitor_trims_name():
    assert Visitor("  Bert \n", "Hello", VisitorAction.accept(), 45).name == "bert"


@pytest.mark.parametrize("name", ["", "   ", "\n"])
def test_visitor_rejects_empty_name(name):
    with pytest.raises(ValueError, match="name must not be empty"):
        Visitor(name, "ghost", VisitorAction.accept(), 0)


def test_visitor_from_dict_rejects_non_string_name():
    with pytest.raises(TypeError, match="name must be a string"):
        Visitor.from_dict({"name": 123, "greeting": "Hi", "action": "accept"})
