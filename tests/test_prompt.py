# Tests for prompt assembly.

import pytest

from models import PriorTurn
from prompt import CONTEXT_TURNS, PORTFOLIO_CONTEXT, build_instructions


def _turns(n):
    return [PriorTurn(is_user=(i % 2 == 0), content=f"turn {i}") for i in range(n)]


class TestBuildInstructions:
    def test_no_history(self):
        result = build_instructions("What tools do you use?", [])
        assert [(i.role, i.content) for i in result] == [
            ("system", PORTFOLIO_CONTEXT),
            ("user", "What tools do you use?"),
        ]

    def test_none_history(self):
        result = build_instructions("hi", None)
        assert len(result) == 2

    @pytest.mark.parametrize("n", [0, 1, 4, 5, 6, 12])
    def test_length(self, n):
        result = build_instructions("new", _turns(n))
        assert len(result) == 1 + min(n, CONTEXT_TURNS) + 1

    def test_keeps_most_recent_in_order(self):
        result = build_instructions("new", _turns(8))
        middle = result[1:-1]
        assert [i.content for i in middle] == ["turn 3", "turn 4", "turn 5", "turn 6", "turn 7"]

    def test_roles_follow_is_user(self):
        turns = _turns(8)
        result = build_instructions("new", turns)
        expected = ["user" if t.is_user else "assistant" for t in turns[-CONTEXT_TURNS:]]
        assert [i.role for i in result[1:-1]] == expected

    def test_new_message_last_and_user(self):
        result = build_instructions("latest", _turns(3))
        assert result[0].role == "system"
        assert result[-1].role == "user"
        assert result[-1].content == "latest"

    def test_no_dedup(self):
        turns = [PriorTurn(is_user=True, content="same"), PriorTurn(is_user=True, content="same")]
        result = build_instructions("same", turns)
        assert [i.content for i in result[1:]] == ["same", "same", "same"]

    def test_wire_alias(self):
        turn = PriorTurn.model_validate({"isUser": False, "content": "hello"})
        assert build_instructions("x", [turn])[1].role == "assistant"


class TestPortfolioContext:
    @pytest.mark.parametrize(
        "line",
        [
            "Modern design trends and 2025 aesthetic directions",
            "Black backgrounds with white text for modern aesthetic",
            "Interested in working with innovative companies that value design",
            "3. FLUX (2023)",
        ],
    )
    def test_biography_lines(self, line):
        assert line in PORTFOLIO_CONTEXT

    def test_only_three_projects(self):
        assert "4. " not in PORTFOLIO_CONTEXT
