"""Tests for context key resolution."""

import pytest

from hr_portal.views.context_keys import UNKNOWN_CONTEXT_KEY, param_extractor, resolve_context_key


class TestResolveContextKey:
    """Tests for the spaceKey -> projectKey -> "Unknown" fallback."""

    def test_space_key_used(self):
        assert resolve_context_key({"spaceKey": "acme"}) == "acme"

    def test_space_key_wins_over_project_key(self):
        assert resolve_context_key({"spaceKey": "acme", "projectKey": "PROJ1"}) == "acme"

    @pytest.mark.parametrize("space_key", [None, "", " ", "\t\n"])
    def test_project_key_used_when_space_key_missing_or_blank(self, space_key):
        params = {"projectKey": "PROJ1"}
        if space_key is not None:
            params["spaceKey"] = space_key

        assert resolve_context_key(params) == "PROJ1"

    @pytest.mark.parametrize(
        "params",
        [
            {},
            {"spaceKey": " "},
            {"projectKey": ""},
            {"spaceKey": "  ", "projectKey": "   "},
            {"other": "value"},
        ],
    )
    def test_unknown_when_nothing_usable(self, params):
        assert resolve_context_key(params) == UNKNOWN_CONTEXT_KEY == "Unknown"

    def test_resolved_value_is_trimmed(self):
        assert resolve_context_key({"spaceKey": "  HR  "}) == "HR"
        assert resolve_context_key({"projectKey": "\tOPS\n"}) == "OPS"

    def test_custom_candidates_and_default(self):
        params = {"teamKey": "T1", "spaceKey": "S1"}

        assert resolve_context_key(params, candidates=("teamKey", "spaceKey")) == "T1"
        assert resolve_context_key({}, candidates=("teamKey",), default="none") == "none"


class TestParamExtractor:
    """Tests for single-parameter extractors."""

    def test_returns_trimmed_value(self):
        assert param_extractor("spaceKey")({"spaceKey": " HR "}) == "HR"

    def test_returns_none_for_missing_or_blank(self):
        extract = param_extractor("spaceKey")

        assert extract({}) is None
        assert extract({"spaceKey": "   "}) is None
