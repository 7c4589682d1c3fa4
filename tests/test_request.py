"""Test suite for request.py - Request validation."""

import pytest

from bnotify.errors import ValidationError
from bnotify.request import Mode, Request


class TestRequest:
    """Test cases for the Request dataclass."""

    def test_defaults(self):
        request = Request()

        assert request.mode is Mode.GET
        assert request.value is None
        assert request.timeout == 2000
        assert request.fade_time == 100
        assert request.fade_steps == 25
        assert request.backend == "notify-send"
        assert request.changes_brightness is False

    @pytest.mark.parametrize("mode", [Mode.SET, Mode.INCREASE, Mode.DECREASE])
    def test_brightness_modes(self, mode):
        assert Request(mode=mode, value=10).changes_brightness is True

    @pytest.mark.parametrize("value", [1, 100])
    def test_set_bounds_accepted(self, value):
        assert Request(mode=Mode.SET, value=value).value == value

    @pytest.mark.parametrize("value", [0, 101])
    def test_set_bounds_rejected(self, value):
        with pytest.raises(ValidationError) as excinfo:
            Request(mode=Mode.SET, value=value)
        assert excinfo.value.field == "set"

    def test_delta_may_be_zero(self):
        assert Request(mode=Mode.DECREASE, value=0).value == 0

    def test_missing_payload(self):
        with pytest.raises(ValidationError):
            Request(mode=Mode.INCREASE)

    def test_get_takes_no_payload(self):
        with pytest.raises(ValidationError) as excinfo:
            Request(mode=Mode.GET, value=50)
        assert excinfo.value.field == "value"

    @pytest.mark.parametrize("kwargs, field", [
        ({"timeout": 120001}, "timeout"),
        ({"timeout": -1}, "timeout"),
        ({"fade_time": 60001}, "fade"),
        ({"fade_steps": 0}, "steps"),
        ({"fade_steps": 201}, "steps"),
        ({"backend": "dunstify"}, "backend"),
    ])
    def test_parameter_bounds(self, kwargs, field):
        with pytest.raises(ValidationError) as excinfo:
            Request(**kwargs)
        assert excinfo.value.field == field

    def test_is_immutable(self):
        request = Request()

        with pytest.raises(AttributeError):
            request.mode = Mode.SET
