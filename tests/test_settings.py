import json
import os
import sys
from pathlib import Path

import pytest

from dogewallet.settings import (
    ConnectionMethod,
    MiningPoolSwitchStrategy,
    Settings,
    default_mining_cpu_core_count,
    default_mining_pool_list,
    default_work_dir,
    is_stable_version,
)


@pytest.fixture
def config(tmp_path):
    return tmp_path / "conf" / "GoldenDoge-gui.config"


@pytest.fixture
def settings(config):
    return Settings(config)


def test_creates_parent_directory(config):
    Settings(config)
    assert config.parent.is_dir()


def test_defaults(settings):
    assert settings.local_rpc_port == 4042
    assert settings.connection_method is ConnectionMethod.BUILTIN
    assert settings.connection_method_set is False
    assert settings.mining_pool_switch_strategy is MiningPoolSwitchStrategy.FAILOVER
    assert settings.wallet_file == ""
    assert settings.recent_wallets == []
    assert settings.walletd_params == []


def test_builtin_end_point(settings):
    assert settings.rpc_end_point == settings.builtin_rpc_end_point
    assert settings.rpc_end_point.startswith("127.0.0.1:")
    assert settings.user_friendly_connection_method == "built-in walletd"


def test_local_end_point(settings):
    settings.local_rpc_port = 5000
    settings.connection_method = ConnectionMethod.LOCAL
    assert settings.connection_method_set is True
    assert settings.rpc_end_point == settings.local_rpc_end_point
    assert settings.rpc_end_point.endswith(":5000")
    assert settings.builtin_rpc_end_point.endswith(":4042")
    assert settings.user_friendly_connection_method == "local walletd"


def test_remote_end_point(settings):
    settings.set_remote_rpc_end_point("node.example.com", 1234)
    settings.connection_method = ConnectionMethod.REMOTE
    assert settings.remote_rpc_end_point == "node.example.com:1234"
    assert settings.rpc_end_point == settings.remote_rpc_end_point
    assert settings.user_friendly_connection_method == settings.remote_rpc_end_point


def test_values_persist(config, settings):
    settings.wallet_file = "w.wallet"
    settings.mining_cpu_core_count = 3
    settings.mining_pool_switch_strategy = MiningPoolSwitchStrategy.RANDOM
    reopened = Settings(config)
    assert reopened.wallet_file == "w.wallet"
    assert reopened.mining_cpu_core_count == 3
    assert reopened.mining_pool_switch_strategy is MiningPoolSwitchStrategy.RANDOM
    assert json.loads(config.read_text())["walletFile"] == "w.wallet"


def test_invalid_json_gives_defaults(config):
    config.parent.mkdir(parents=True)
    config.write_text("{not json")
    assert Settings(config).local_rpc_port == 4042


def test_recent_wallets(settings):
    settings.add_recent_wallet("a")
    settings.add_recent_wallet("b")
    settings.add_recent_wallet("a")
    assert settings.recent_wallets == ["a", "b"]
    settings.clear_recent_wallets()
    assert settings.recent_wallets == []


def test_walletd_params_are_simplified(settings):
    settings.set_walletd_params("  --a \n  --b\t--c ")
    assert settings.walletd_params == ["--a", "--b", "--c"]


def test_pool_list_removes_duplicates(settings):
    settings.mining_pool_list = ["x", "x", "y"]
    assert settings.mining_pool_list == ["x", "y"]


def test_default_pool_list(settings):
    assert default_mining_pool_list() == ["goldendoge.m2pool.eu:4425"]
    assert settings.mining_pool_list == default_mining_pool_list()


def test_restore_default_pool_list_when_absent(settings):
    settings.restore_default_pool_list()
    assert settings.mining_pool_list == default_mining_pool_list()


def test_restore_default_pool_list_keeps_custom(settings):
    settings.mining_pool_list = ["pool.example.com:1"]
    settings.restore_default_pool_list()
    assert settings.mining_pool_list == ["pool.example.com:1"] + default_mining_pool_list()
    settings.restore_default_pool_list()
    assert settings.mining_pool_list == ["pool.example.com:1"] + default_mining_pool_list()


def test_default_core_count_bounds():
    count = default_mining_cpu_core_count()
    assert 1 <= count <= max(1, os.cpu_count() or 1)


def test_default_core_count_without_cpu_info(monkeypatch):
    monkeypatch.setattr(os, "cpu_count", lambda: None)
    assert default_mining_cpu_core_count() == 1


def test_default_work_dir_linux(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "linux")
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    assert default_work_dir() == tmp_path / ".GoldenDoge"


def test_stable_version():
    assert is_stable_version() is True