"""
Test configuration and fixtures for pytest
"""

import pytest


JOIN_EXTERNAL_OUTPUT = """\
Monitors:
├──Monitor eDP-1 (Built-in display)
│   ├──Vendor: BOE
│   ├──Product: 0x0bca
│   ├──Display mode: 1920x1080@60.000
│   └──Modes: (2)
│       ├──1920x1080@60.000
│       └──1280x720@60.000
└──Monitor HDMI-1 (LG Electronics 27")
    ├──Vendor: GSM
    ├──Display mode: 2560x1440@59.951
    └──Modes: (1)
        └──2560x1440@59.951

Logical monitors:
├──Logical monitor #1
│   ├──Position: (0, 0)
│   ├──Scale: 1.0
│   ├──Transform: normal
│   ├──Primary: no
│   └──Monitors: (1)
│       └──eDP-1 (Built-in display)
└──Logical monitor #2
    ├──Position: (1920, 0)
    ├──Scale: 1.0
    ├──Transform: normal
    ├──Primary: yes
    └──Monitors: (1)
        └──HDMI-1 (LG Electronics 27")
"""

BUILTIN_ONLY_OUTPUT = """\
Monitors:
└──Monitor eDP-1 (Built-in display)
    ├──Vendor: BOE
    └──Display mode: 1920x1080@60.000

Logical monitors:
└──Logical monitor #1
    ├──Position: (0, 0)
    ├──Primary: yes
    └──Monitors: (1)
        └──eDP-1 (Built-in display)
"""

# Both panels connected, only the built-in one in use
BUILTIN_WITH_EXTERNAL_OUTPUT = """\
Monitors:
├──Monitor eDP-1 (Built-in display)
│   └──Vendor: BOE
└──Monitor HDMI-1 (LG Electronics 27")
    └──Vendor: GSM

Logical monitors:
└──Logical monitor #1
    ├──Position: (0, 0)
    ├──Primary: yes
    └──Monitors: (1)
        └──eDP-1 (Built-in display)
"""


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep settings reads and writes inside a temporary XDG config dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return tmp_path / "config" / "gdswitch"


@pytest.fixture
def join_external_output():
    return JOIN_EXTERNAL_OUTPUT


@pytest.fixture
def builtin_only_output():
    return BUILTIN_ONLY_OUTPUT


@pytest.fixture
def builtin_with_external_output():
    return BUILTIN_WITH_EXTERNAL_OUTPUT
