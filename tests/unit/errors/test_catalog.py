"""
Unit tests for the error catalog and ErrorCode
"""

import threading

import pytest

from customerror.errors.catalog import Catalog, ErrorCode, new_catalog, new_error_code
from customerror.errors.custom_error import is_error
from customerror.errors.exceptions import (
    CatalogErrorNotFoundError,
    CatalogInvalidNameError,
    ErrorCodeInvalidCodeError,
)
from customerror.errors.fault import InvalidCustomErrorFault
from customerror.errors.options import (
    with_code,
    with_error,
    with_language,
    with_status_code,
    with_tag,
    with_translation,
)


@pytest.fixture
def catalog():
    return new_catalog("test")


class TestErrorCode:
    """ErrorCode normalization and grammar"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("1A_ERR_A1_B2_3C", "1A_ERR_A1_B2_3C"),
            ("err_a1_b2", "ERR_A1_B2"),
            ("e12345678", "E12345678"),
            ("invalid_request_body", "INVALID_REQUEST_BODY"),
        ],
    )
    def test_valid_codes(self, name, expected):
        code = new_error_code(name)

        assert code == expected
        assert isinstance(code, ErrorCode)

    @pytest.mark.parametrize("name", ["", "A__B", "_A", "A_", "A-B", "bad code!"])
    def test_invalid_codes(self, name):
        with pytest.raises(ErrorCodeInvalidCodeError) as exc_info:
            ErrorCode(name)

        assert exc_info.value.code == "CE_ERR_INVALID_ERROR_CODE"


class TestCatalogName:
    def test_valid_name(self):
        assert new_catalog("test").name == "test"

    @pytest.mark.parametrize("name", ["", "abc", None])
    def test_invalid_name(self, name):
        with pytest.raises(CatalogInvalidNameError) as exc_info:
            new_catalog(name)

        assert exc_info.value.code == "CE_ERR_CATALOG_INVALID_NAME"


class TestCatalog:
    """Registration, lookup and instantiation"""

    def test_localized_round_trip(self, catalog):
        code = catalog.set(
            "INVALID_REQUEST_BODY",
            "invalid request body",
            with_translation("pt-BR", "corpo da solicitação inválido"),
        )

        err = catalog.get("INVALID_REQUEST_BODY").new(
            with_language("pt-BR"), with_error(Exception("some error"))
        )

        assert code == "INVALID_REQUEST_BODY"
        assert str(err) == "corpo da solicitação inválido. Original Error: some error"

    def test_lookup_is_case_insensitive(self, catalog):
        code = catalog.set("e1010", "invalid response", with_translation("es-ES", "respuesta inválida"))

        err = catalog.get("E1010").new(with_language("es-ES"))

        assert code == "E1010"
        assert str(err) == "respuesta inválida"

    def test_template_defaults_survive_instantiation(self, catalog):
        catalog.add("E2020", "payment rejected", with_code("E2020"), with_status_code(402), with_tag("billing"))

        err = catalog.get("e2020").new()

        assert err.api_error() == "E2020: payment rejected (402 - Payment Required). Tags: billing"

    def test_missing_code(self, catalog):
        with pytest.raises(CatalogErrorNotFoundError) as exc_info:
            catalog.get("UNKNOWN")

        err = exc_info.value
        assert err.code == "CE_ERR_CATALOG_ERR_NOT_FOUND"
        assert err.fields.get("error_code") == "UNKNOWN"
        assert str(err).startswith("CE_ERR_CATALOG_ERR_NOT_FOUND: missing error")
        assert is_error(err, CatalogErrorNotFoundError)

    def test_invalid_code(self, catalog):
        with pytest.raises(ErrorCodeInvalidCodeError):
            catalog.set("bad code!", "some message")
        with pytest.raises(ErrorCodeInvalidCodeError):
            catalog.get("")

    def test_get_with_options_returns_child(self, catalog):
        catalog.set("E1010", "invalid response")

        child = catalog.get("E1010", with_tag("x"))

        assert child.tags == {"x"}
        assert catalog.get("E1010").tags == set()

    def test_get_with_language_uses_registered_translation(self, catalog):
        catalog.set("E1010", "invalid response", with_translation("es-ES", "respuesta inválida"))

        child = catalog.get("E1010", with_language("es-ES"))

        assert str(child) == "respuesta inválida"
        assert str(catalog.get("E1010")) == "invalid response"

    def test_set_overwrites(self, catalog):
        catalog.set("E1010", "first message")
        catalog.set("e1010", "second message")

        assert len(catalog) == 1
        assert catalog.get("E1010").message == "second message"

    def test_must_variants_fault(self, catalog):
        with pytest.raises(InvalidCustomErrorFault) as exc_info:
            catalog.must_get("UNKNOWN")
        assert is_error(exc_info.value, CatalogErrorNotFoundError)

        with pytest.raises(InvalidCustomErrorFault):
            catalog.must_set("bad code!", "some message")

        assert catalog.must_set("E1", "some message") == "E1"
        assert catalog.must_get("e1").message == "some message"

    def test_membership_and_codes(self, catalog):
        catalog.set("ERR_B", "second message")
        catalog.set("err_a", "first message")

        assert "err_a" in catalog
        assert "bad code!" not in catalog
        assert catalog.codes() == ["ERR_A", "ERR_B"]
        assert list(catalog) == ["ERR_A", "ERR_B"]

    def test_to_dict(self, catalog):
        catalog.set("E1010", "invalid response", with_tag("api"))

        assert catalog.to_dict() == {
            "name": "test",
            "custom_errors": {"E1010": {"message": "invalid response", "tags": ["api"]}},
        }

    def test_concurrent_registration(self):
        shared = Catalog("concurrent")

        def register(offset):
            for i in range(50):
                shared.set(f"E{offset}{i:03d}", f"message {offset} {i}")

        threads = [threading.Thread(target=register, args=(n,)) for n in range(1, 9)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(shared) == 400
