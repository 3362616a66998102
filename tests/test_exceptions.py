"""
ParamBinder Backend — Exception Tests
======================================

What:  Tests for the BindingError family: reason codes, context, equality.
"""

import pytest

from app.exceptions import (
    BindingError,
    BindingErrorReason,
    CoercionFailedError,
    MissingRequiredError,
)


class TestBindingError:
    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError, match="no reason code"):
            BindingError("age", "could not bind")

    def test_subclass_without_reason_is_rejected(self):
        class Unclassified(BindingError):
            pass

        with pytest.raises(TypeError, match="Unclassified"):
            Unclassified("age", "could not bind")

    def test_reason_and_param_in_context(self):
        exc = MissingRequiredError("username")
        assert exc.reason is BindingErrorReason.MISSING_REQUIRED
        assert exc.context == {"param": "username", "reason": "missing_required"}


class TestCallerContext:
    """The context dict a caller passes in is copied, never written to."""

    def test_missing_required(self):
        context = {"source": "query"}
        exc = MissingRequiredError("username", context=context)
        assert context == {"source": "query"}
        assert exc.context["source"] == "query"
        assert exc.context["param"] == "username"

    def test_coercion_failed(self):
        context = {"source": "form"}
        exc = CoercionFailedError("age", "abc", context=context)
        assert context == {"source": "form"}
        assert exc.context["raw_value"] == "abc"

    def test_shared_context_does_not_leak_between_errors(self):
        context = {}
        first = CoercionFailedError("age", "abc", context=context)
        second = MissingRequiredError("username", context=context)
        assert context == {}
        assert "raw_value" not in second.context
        assert first.context["param"] == "age"
