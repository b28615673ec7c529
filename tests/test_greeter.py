"""Tests for the per-action desk messages."""
import pytest

from treehouse.desk import greet_visitor, greeting_lines
from treehouse.models import Visitor, VisitorAction


def test_accept_greets_and_welcomes(registry):
    bert = registry.find("bert").unwrap()

    assert greeting_lines(bert) == [
        "Hello Bert, enjoy your treehouse.",
        "Welcome to the tree house, bert",
    ]


def test_accept_with_note_under_drinking_age(registry):
    steve = registry.find("steve").unwrap()

    assert greeting_lines(steve) == [
        "Hi Steve. Your milk is in the fridge.",
        "Welcome to the tree house, steve",
        "Lactose-free milk is in the fridge",
        "Do not serve alcohol to steve",
    ]


@pytest.mark.parametrize("age, warned", [(20, True), (21, False), (45, False), (-1, True)])
def test_alcohol_notice_boundary(age, warned):
    visitor = Visitor("barney", "Hey", VisitorAction.accept_with_note("Bring snacks"), age)

    lines = greeting_lines(visitor)

    assert ("Do not serve alcohol to barney" in lines) is warned
    assert lines[:3] == ["Hey", "Welcome to the tree house, barney", "Bring snacks"]


def test_alcohol_notice_only_for_noted_visitors():
    # Plain accept never gets the notice, whatever the age.
    visitor = Visitor("pebbles", "Hi", VisitorAction.accept(), 3)
    assert greeting_lines(visitor) == ["Hi", "Welcome to the tree house, pebbles"]


def test_custom_drinking_age():
    visitor = Visitor("barney", "Hey", VisitorAction.accept_with_note("Snacks"), 19)
    assert "Do not serve alcohol to barney" not in greeting_lines(visitor, drinking_age=18)


def test_refuse_has_no_welcome(registry):
    fred = registry.find("fred").unwrap()

    assert greeting_lines(fred) == [
        "Wow, who invited Fred?",
        "Do not allow fred in!",
    ]


def test_probation_message():
    lines = greeting_lines(Visitor.newcomer("wilma"))
    assert lines == ["New friend", "wilma is now a probationary member"]


def test_greet_visitor_echoes_each_line(registry):
    printed = []

    greet_visitor(registry.find("steve").unwrap(), printed.append)

    assert printed == greeting_lines(registry.find("steve").unwrap())
