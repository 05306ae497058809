"""Tests for the DetectionResult contract."""

import dataclasses
import json
from pathlib import Path

import pytest

from has_nerd_font.result import Confidence, DetectionResult, DetectionSource
from has_nerd_font.terminal import Terminal, UnknownTerminal


def sample_result(source, detected, **kwargs):
    """Build a result with typical optional fields filled in."""
    if source is DetectionSource.CONFIG_ERROR:
        kwargs.setdefault("error_reason", "missing plist")
    return DetectionResult(
        detected=detected,
        source=source,
        terminal=kwargs.pop("terminal", Terminal.TERMINAL_APP),
        font=kwargs.pop("font", "MesloLGS Nerd Font"),
        profile=kwargs.pop("profile", "Default"),
        **kwargs,
    )


@pytest.mark.unit
class TestExitCodes:
    """Test the source/detected to exit code table."""

    @pytest.mark.parametrize(
        "source, detected, expected",
        [
            (DetectionSource.ENV_OVERRIDE_ENABLED, True, 0),
            (DetectionSource.BUNDLED_TERMINAL, True, 0),
            (DetectionSource.ENV_OVERRIDE_DISABLED, False, 1),
            (DetectionSource.UNKNOWN_TERMINAL, None, 2),
            (DetectionSource.REMOTE_SESSION, None, 3),
            (DetectionSource.NO_RESOLVER, None, 4),
            (DetectionSource.CONFIG_ERROR, None, 5),
            (DetectionSource.TERMINAL_CONFIG, True, 0),
            (DetectionSource.TERMINAL_CONFIG, False, 6),
            (DetectionSource.TERMINAL_CONFIG, None, 5),
        ],
    )
    def test_exit_code(self, source, detected, expected):
        assert sample_result(source, detected).exit_code == expected


@pytest.mark.unit
class TestInvariants:
    """Test construction-time validation."""

    def test_config_error_requires_reason(self):
        with pytest.raises(ValueError):
            DetectionResult(detected=None, source=DetectionSource.CONFIG_ERROR)

    def test_config_error_requires_unknown_detected(self):
        with pytest.raises(ValueError):
            DetectionResult(
                detected=False,
                source=DetectionSource.CONFIG_ERROR,
                error_reason="bad",
            )

    def test_reason_only_for_config_error(self):
        with pytest.raises(ValueError):
            DetectionResult(
                detected=True,
                source=DetectionSource.TERMINAL_CONFIG,
                error_reason="unexpected",
            )

    def test_override_enabled_requires_true(self):
        with pytest.raises(ValueError):
            DetectionResult(detected=False, source=DetectionSource.ENV_OVERRIDE_ENABLED)

    def test_remote_session_requires_unknown(self):
        with pytest.raises(ValueError):
            DetectionResult(detected=True, source=DetectionSource.REMOTE_SESSION)

    def test_result_is_immutable(self):
        result = sample_result(DetectionSource.TERMINAL_CONFIG, True)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.detected = False

    def test_default_confidence_is_certain(self):
        result = DetectionResult(detected=True, source=DetectionSource.BUNDLED_TERMINAL)
        assert result.confidence is Confidence.CERTAIN


@pytest.mark.unit
class TestSerialization:
    """Test JSON output."""

    def test_to_dict_key_fields(self):
        result = sample_result(
            DetectionSource.TERMINAL_CONFIG,
            False,
            config_path=Path("/home/u/Library/Preferences/com.apple.Terminal.plist"),
        )
        data = result.to_dict()

        assert data["detected"] is False
        assert data["source"] == "terminal_config"
        assert data["terminal"] == "terminal_app"
        assert data["font"] == "MesloLGS Nerd Font"
        assert data["config_path"] == "/home/u/Library/Preferences/com.apple.Terminal.plist"
        assert data["profile"] == "Default"
        assert data["confidence"] == "certain"
        assert data["exit_code"] == 6
        assert "error_reason" not in data

    def test_error_reason_included_for_config_error(self):
        result = sample_result(DetectionSource.CONFIG_ERROR, None, error_reason="HOME is not set")
        data = json.loads(result.to_json())
        assert data["error_reason"] == "HOME is not set"
        assert data["detected"] is None

    def test_unknown_terminal_serializes_raw_name(self):
        result = DetectionResult(
            detected=None,
            source=DetectionSource.NO_RESOLVER,
            terminal=UnknownTerminal("CoolNewTerm"),
        )
        data = json.loads(result.to_json())
        assert data["terminal"] == {"unknown": "CoolNewTerm"}
        assert data["font"] is None
        assert data["config_path"] is None


@pytest.mark.unit
class TestExplain:
    """Test human-readable explanations."""

    def test_explicit_disable(self):
        text = sample_result(DetectionSource.ENV_OVERRIDE_DISABLED, False).explain()
        assert "explicitly" in text
        assert "disabled" in text

    def test_unknown_terminal(self):
        text = sample_result(DetectionSource.UNKNOWN_TERMINAL, None).explain()
        assert "unknown" in text
        assert "terminal" in text

    def test_config_error_includes_reason(self):
        text = sample_result(
            DetectionSource.CONFIG_ERROR, None, error_reason="no font configured"
        ).explain()
        assert text == "failed to read terminal configuration: no font configured"

    def test_terminal_config_depends_on_detected(self):
        positive = sample_result(DetectionSource.TERMINAL_CONFIG, True).explain()
        negative = sample_result(DetectionSource.TERMINAL_CONFIG, False).explain()
        assert "indicates a Nerd Font is active" in positive
        assert "does not indicate" in negative

    def test_every_source_has_an_explanation(self):
        detected_for = {
            DetectionSource.ENV_OVERRIDE_ENABLED: True,
            DetectionSource.ENV_OVERRIDE_DISABLED: False,
            DetectionSource.BUNDLED_TERMINAL: True,
            DetectionSource.TERMINAL_CONFIG: True,
        }
        for source in DetectionSource:
            result = sample_result(source, detected_for.get(source))
            assert result.explain()
