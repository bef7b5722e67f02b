import pytest

from concrete_utils.tag_invoke import CustomizationPoint, tag_invocable, tag_invoke


class TiTestType:
    def __init__(self):
        self.provided_n = None
        self.called = False


class DerivedTiTestType(TiTestType):
    pass


def _make_point():
    point = CustomizationPoint("ti_test_cp")

    @point.register(TiTestType)
    def _impl(self, n):
        self.provided_n = n
        self.called = True
        return self

    return point


def test_tag_invoke_should_dispatch():
    point = _make_point()
    instance = TiTestType()
    result = point(instance, 13)
    assert instance.called is True
    assert instance.provided_n == 13
    assert result is instance


def test_tag_invoke_function_dispatches_like_call():
    point = _make_point()
    instance = TiTestType()
    result = tag_invoke(point, instance, 13)
    assert result is instance
    assert instance.provided_n == 13


def test_dispatch_follows_base_classes():
    point = _make_point()
    instance = DerivedTiTestType()
    assert point(instance, 7) is instance
    assert instance.called is True


def test_separate_points_dispatch_independently():
    first = _make_point()
    second = CustomizationPoint("other")

    @second.register(TiTestType)
    def _other(self, n):
        self.provided_n = n
        self.called = False
        return self

    instance = TiTestType()
    second(instance, 13)
    assert instance.called is False
    first(instance, 13)
    assert instance.called is True


def test_missing_implementation_raises_type_error():
    point = _make_point()
    with pytest.raises(TypeError):
        point(object(), 13)


def test_tag_invocable_reports_availability():
    point = _make_point()
    assert tag_invocable(point, TiTestType(), 13) is True
    assert tag_invocable(point, "text", 13) is False
    assert tag_invocable(object(), TiTestType()) is False


def test_non_customization_point_tag_is_not_invocable():
    with pytest.raises(TypeError):
        tag_invoke("not a tag", TiTestType())


def test_register_rejects_non_class():
    point = CustomizationPoint("x")
    with pytest.raises(TypeError):
        point.register(3)


def test_register_returns_the_function():
    point = CustomizationPoint("x")

    def impl(value):
        return value

    assert point.register(int)(impl) is impl
    assert point(5) == 5