# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for install()."""

from __future__ import annotations

from pathlib import Path

from omnibase_panics.models import ModelPanicsConfig, ModelPanicsOptions
from omnibase_panics import runtime
from omnibase_panics.runtime import get_circuit_breaker, get_config
from omnibase_panics.runtime.panics_state import set_config
from omnibase_panics.services import get_deployment_listener, install


class TestInstall:
    """Tests for configuration installation."""

    def test_replaces_configuration(self, tmp_path: Path) -> None:
        options = ModelPanicsOptions(
            env="staging",
            filepath=str(tmp_path),
            tags={"host": "app-01", "team": "payments"},
            custom_message="@oncall",
        )

        installed = install(options)

        assert get_config() is installed
        assert installed.env == "staging"
        assert installed.filepath == str(tmp_path)
        assert installed.tag_string == "`host: app-01` | `team: payments`"
        assert installed.custom_message == "@oncall"

    def test_missing_env_keeps_current_label(self) -> None:
        set_config(ModelPanicsConfig(env="from-tkpenv"))

        installed = install(ModelPanicsOptions(filepath="/tmp"))

        assert installed.env == "from-tkpenv"

    def test_last_install_wins(self) -> None:
        install(ModelPanicsOptions(env="first"))
        install(ModelPanicsOptions(env="second"))

        assert get_config().env == "second"

    def test_dont_let_me_die_detaches_breaker(self) -> None:
        install(ModelPanicsOptions(env="production", dont_let_me_die=True))

        assert get_circuit_breaker() is None

    def test_breaker_stays_attached_by_default(self) -> None:
        install(ModelPanicsOptions(env="production"))

        assert get_circuit_breaker() is not None


class TestInstallListener:
    """Tests for deployment listener start-up on install."""

    def test_single_listener_across_installs(self) -> None:
        options = ModelPanicsOptions(env="production")

        install(options)
        listener = get_deployment_listener()
        install(options)

        assert listener is not None
        assert get_deployment_listener() is listener
        assert listener.is_running


class TestConfigurationWritePath:
    """Tests that install() is the only public write path."""

    def test_runtime_exports_no_setter(self) -> None:
        assert "set_config" not in runtime.__all__
        assert not hasattr(runtime, "set_config")
        assert "get_config" in runtime.__all__
