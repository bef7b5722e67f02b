from enum import Enum

import pytest

from concrete_utils.status_domain import (
    Errc,
    StatusCode,
    StatusDescriptor,
    StatusDomain,
    StatusError,
)

DOMAIN_ID = "{09E0ECBF-A737-454D-8633-17E733CDE15F}"


class SampleErrc(Enum):
    SUCCESS = 0
    PERM = 3
    OTHER_SUCCESS = 5
    NOT_IMPLEMENTED = 7


@pytest.fixture
def domain():
    return StatusDomain(
        "test-domain",
        DOMAIN_ID,
        [
            StatusDescriptor(SampleErrc.SUCCESS, Errc.SUCCESS, "yay!"),
            StatusDescriptor(SampleErrc.PERM, Errc.PERMISSION_DENIED, "oh no"),
            StatusDescriptor(SampleErrc.OTHER_SUCCESS, Errc.SUCCESS, "oh kay"),
            StatusDescriptor(SampleErrc.NOT_IMPLEMENTED, Errc.UNKNOWN, "till later"),
        ],
    )


def test_enum_value_can_be_converted_to_status_code(domain):
    code = domain.code(SampleErrc.SUCCESS)
    assert code.value is SampleErrc.SUCCESS
    assert code.domain is domain


def test_domain_forwards_the_domain_id(domain):
    assert domain.domain_id == DOMAIN_ID


def test_domain_forwards_the_domain_name(domain):
    assert domain.name == "test-domain"


def test_domain_translates_failure_and_success(domain):
    assert domain.code(SampleErrc.SUCCESS).success()
    assert domain.code(SampleErrc.OTHER_SUCCESS).success()
    assert domain.code(SampleErrc.PERM).failure()
    assert domain.code(SampleErrc.NOT_IMPLEMENTED).failure()


@pytest.mark.parametrize(
    ("value", "equivalent"),
    [
        (SampleErrc.SUCCESS, Errc.SUCCESS),
        (SampleErrc.PERM, Errc.PERMISSION_DENIED),
        (SampleErrc.OTHER_SUCCESS, Errc.SUCCESS),
        (SampleErrc.NOT_IMPLEMENTED, Errc.UNKNOWN),
    ],
)
def test_domain_allows_generic_comparisons(domain, value, equivalent):
    code = domain.code(value)
    assert code == equivalent
    assert equivalent == code
    assert code.generic_code() is equivalent


@pytest.mark.parametrize(
    ("value", "description"),
    [
        (SampleErrc.SUCCESS, "yay!"),
        (SampleErrc.PERM, "oh no"),
        (SampleErrc.OTHER_SUCCESS, "oh kay"),
        (SampleErrc.NOT_IMPLEMENTED, "till later"),
    ],
)
def test_domain_returns_the_correct_description(domain, value, description):
    assert domain.code(value).message() == description


def test_code_compares_with_enum_value(domain):
    code = domain.code(SampleErrc.PERM)
    assert code == SampleErrc.PERM
    assert (code == SampleErrc.SUCCESS) is False


def test_codes_of_same_domain_compare_by_value(domain):
    assert domain.code(SampleErrc.PERM) == domain.code(SampleErrc.PERM)
    assert (domain.code(SampleErrc.PERM) == domain.code(SampleErrc.SUCCESS)) is False
    assert hash(domain.code(SampleErrc.PERM)) == hash(domain.code(SampleErrc.PERM))


def test_mismatching_generic_code_is_not_equal(domain):
    code = domain.code(SampleErrc.PERM)
    assert (code == Errc.SUCCESS) is False
    assert code.generic_code() is Errc.PERMISSION_DENIED


def test_codes_of_other_domain_are_not_equal(domain):
    other = StatusDomain(
        "other", "{00000000-0000-0000-0000-000000000001}",
        [StatusDescriptor(SampleErrc.PERM, Errc.PERMISSION_DENIED, "oh no")],
    )
    assert (domain.code(SampleErrc.PERM) == other.code(SampleErrc.PERM)) is False


def test_unknown_value_has_fallback_semantics(domain):
    code = domain.code(42)
    assert code.message() == "unknown error code value"
    assert code.generic_code() is Errc.UNKNOWN
    assert code.failure()


def test_throw_exception_raises_status_error(domain):
    code = domain.code(SampleErrc.PERM)
    with pytest.raises(StatusError) as info:
        code.throw_exception()
    assert info.value.code is code
    assert str(info.value) == "oh no"


def test_empty_domain_is_rejected():
    with pytest.raises(ValueError):
        StatusDomain("empty", DOMAIN_ID, [])


def test_unsorted_domain_is_rejected():
    with pytest.raises(ValueError):
        StatusDomain(
            "unsorted",
            DOMAIN_ID,
            [
                StatusDescriptor(SampleErrc.PERM, Errc.PERMISSION_DENIED, "oh no"),
                StatusDescriptor(SampleErrc.SUCCESS, Errc.SUCCESS, "yay!"),
            ],
        )


def test_domains_compare_by_id(domain):
    same = StatusDomain(
        "renamed", DOMAIN_ID, [StatusDescriptor(SampleErrc.SUCCESS, Errc.SUCCESS, "yay!")]
    )
    assert same == domain
    assert isinstance(domain.code(SampleErrc.SUCCESS), StatusCode)