from unittest.mock import MagicMock

import pytest

from gdswitch.gdctl import GdctlClient, GdctlError
from gdswitch.models import JoinPosition, Mode
from gdswitch.switcher import DisplaySwitcher, SwitchResult
from gdswitch import utils


@pytest.fixture
def client():
    c = MagicMock(spec=GdctlClient)
    c.binary = "gdctl"
    return c


@pytest.fixture
def notify():
    return MagicMock()


class TestDisplaySwitcher:
    """Test detect/switch orchestration"""

    def test_detect(self, client, join_external_output):
        client.show.return_value = join_external_output

        monitors, mode = DisplaySwitcher(client).detect()

        assert [m.id for m in monitors] == ["eDP-1", "HDMI-1"]
        assert mode == Mode.JOIN_EXTERNAL

    def test_current_mode_on_gdctl_error(self, client):
        client.show.side_effect = GdctlError("gdctl not found")
        assert DisplaySwitcher(client).current_mode() == Mode.UNKNOWN

    def test_switch_applies_and_confirms(
        self, client, notify, builtin_with_external_output, join_external_output,
    ):
        client.show.side_effect = [builtin_with_external_output, join_external_output]

        result = DisplaySwitcher(client, notify).switch(Mode.JOIN_EXTERNAL, JoinPosition.LEFT)

        client.apply.assert_called_once_with([
            "--logical-monitor", "--monitor", "eDP-1",
            "--logical-monitor", "--monitor", "HDMI-1", "--left-of", "eDP-1", "--primary",
        ])
        assert result == SwitchResult(True, "Switched to Join (external primary).", Mode.JOIN_EXTERNAL)
        notify.assert_called_once_with(result.message)

    def test_switch_uses_stored_position(self, client, builtin_with_external_output):
        utils.save_join_position("Below")
        client.show.return_value = builtin_with_external_output

        DisplaySwitcher(client).switch("join-builtin")

        args = client.apply.call_args[0][0]
        assert args[-2:] == ["--below", "eDP-1"]

    def test_cannot_apply_mode(self, client, notify, builtin_only_output):
        client.show.return_value = builtin_only_output

        result = DisplaySwitcher(client, notify).switch(Mode.EXTERNAL)

        client.apply.assert_not_called()
        assert result == SwitchResult(False, "Cannot apply mode 'external'.", Mode.BUILTIN)
        notify.assert_called_once_with("Cannot apply mode 'external'.")

    def test_unknown_mode_is_not_applied(self, client, builtin_with_external_output):
        client.show.return_value = builtin_with_external_output

        result = DisplaySwitcher(client).switch("extend")

        client.apply.assert_not_called()
        assert result.applied is False
        assert result.message == "Cannot apply mode 'unknown'."

    def test_set_failure(self, client, notify, builtin_with_external_output):
        client.show.return_value = builtin_with_external_output
        client.apply.side_effect = GdctlError("gdctl set failed: bad layout")

        result = DisplaySwitcher(client, notify).switch(Mode.JOIN_BUILTIN)

        assert result == SwitchResult(False, "Error: gdctl set failed: bad layout", Mode.UNKNOWN)
        notify.assert_called_once_with("Error: gdctl set failed: bad layout")

    def test_show_failure(self, client, notify):
        client.show.side_effect = GdctlError("gdctl not found")

        result = DisplaySwitcher(client, notify).switch(Mode.BUILTIN)

        client.apply.assert_not_called()
        assert result.applied is False
        assert result.message == "Error: gdctl not found"

    def test_mismatch_after_apply(self, client, notify, builtin_with_external_output):
        client.show.return_value = builtin_with_external_output

        result = DisplaySwitcher(client, notify).switch(Mode.JOIN_BUILTIN)

        assert result.applied is True
        assert result.mode == Mode.BUILTIN
        assert "but gdctl reports Built-in only" in result.message

    def test_confirm_failure_after_set(self, client, notify, builtin_with_external_output):
        client.show.side_effect = [
            builtin_with_external_output,
            GdctlError("gdctl show timed out after 10s"),
        ]

        result = DisplaySwitcher(client, notify).switch(Mode.JOIN_BUILTIN)

        client.apply.assert_called_once()
        assert result == SwitchResult(
            True,
            "Switched to Join (built-in primary), but the current mode could not be "
            "confirmed: gdctl show timed out after 10s",
            Mode.UNKNOWN,
        )
        notify.assert_called_once_with(result.message)

    def test_plan_without_applying(self, client, builtin_with_external_output):
        client.show.return_value = builtin_with_external_output

        args = DisplaySwitcher(client).plan(Mode.EXTERNAL)

        assert args == ["--logical-monitor", "--monitor", "HDMI-1", "--primary"]
        client.apply.assert_not_called()

    def test_without_notifier_logs(self, client, builtin_only_output, caplog):
        client.show.return_value = builtin_only_output

        with caplog.at_level("INFO", logger="gdswitch.switcher"):
            DisplaySwitcher(client).switch(Mode.EXTERNAL)

        assert "Cannot apply mode 'external'." in caplog.text
