"""Error Hierarchy — verifies codes, statuses and public bodies.

Tests:
    - Each error maps to its HTTP status and code
    - StorageError never exposes its internal message publicly
    - MemberNotFoundError carries the member id in context, not in the body
"""

from member_api.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity, InvalidMemberIdError,
    MemberApiError, MemberNotFoundError, StorageError,
)


def test_storage_error_hides_internal_detail():
    err = StorageError("connection refused on 10.0.0.5", "query")
    assert err.http_status == 500
    assert err.code == "STORAGE_ERROR"
    assert err.category == ErrorCategory.STORAGE
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.to_response() == {"message": "Server error"}
    assert "10.0.0.5" in err.message
    assert err.operation == "query"
    assert err.context.operation == "query"


def test_not_found_error_body_and_context():
    err = MemberNotFoundError("m2")
    assert err.http_status == 404
    assert err.to_response() == {"message": "Member not found"}
    assert err.context.member_id == "m2"
    assert err.to_log_extra() == {
        "error_code": "MEMBER_NOT_FOUND",
        "category": "resource_not_found",
        "severity": "info",
        "member_id": "m2",
        "operation": None,
    }


def test_invalid_member_id_is_client_error():
    err = InvalidMemberIdError("Member ID cannot be empty")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {"message": "Member ID cannot be empty"}


def test_all_errors_share_base_class():
    for err in (
        StorageError("x", "query"),
        MemberNotFoundError("m1"),
        InvalidMemberIdError("bad"),
    ):
        assert isinstance(err, MemberApiError)


def test_context_is_preserved_when_supplied():
    ctx = ErrorContext(member_id="m7")
    err = StorageError("timeout", "query", ctx)
    assert err.context is ctx
    assert err.context.member_id == "m7"
    assert err.context.operation == "query"


def test_storage_error_log_extra_carries_category_and_severity():
    err = StorageError("timeout", "query", ErrorContext(member_id="m3"))
    assert err.to_log_extra() == {
        "error_code": "STORAGE_ERROR",
        "category": "storage",
        "severity": "critical",
        "member_id": "m3",
        "operation": "query",
    }
