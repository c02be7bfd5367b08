from errors import InvalidStatus, NotFound, OrderError, ValidationFailed


def test_kinds_share_base():
    for error in (ValidationFailed({"customer": ["x"]}), NotFound("abc"), InvalidStatus("bogus")):
        assert isinstance(error, OrderError)


def test_validation_failed_body():
    error = ValidationFailed({"customer": ["must not be empty"]})
    assert error.status_code == 400
    assert error.to_body() == {
        "message": "validation failed",
        "details": {"customer": ["must not be empty"]},
    }


def test_not_found_body_has_no_details():
    error = NotFound("abc")
    assert error.status_code == 404
    assert error.order_id == "abc"
    assert error.to_body() == {"message": "order not found"}


def test_invalid_status_body():
    error = InvalidStatus("bogus")
    assert error.status_code == 400
    assert error.to_body() == {"message": "invalid status", "details": {"status": ["invalid status"]}}
