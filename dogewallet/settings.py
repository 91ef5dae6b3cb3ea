"""Persistent wallet GUI settings stored as a JSON document."""

from __future__ import annotations

import json
import os
import sys
from enum import IntEnum
from pathlib import Path
from typing import Any

VERSION = "1.0.0"
VERSION_SUFFIX = "stable"
REVISION = "1"

APPLICATION_NAME = "GoldenDoge-gui"
CONFIG_FILE_NAME = "GoldenDoge-gui.config"
LOCAL_HOST = "127.0.0.1"
DEFAULT_LOCAL_RPC_PORT = 4042
DEFAULT_MINING_POOLS = ("goldendoge.m2pool.eu:4425",)

_LINUX_WORK_DIR = ".GoldenDoge"

_OPTION_WALLET_FILE = "walletFile"
_OPTION_LOCAL_RPC_PORT = "localRpcPort"
_OPTION_REMOTE_RPC_END_POINT = "remoteRpcEndPoint"
_OPTION_CONNECTION_METHOD = "connectionMethod"
_OPTION_MINING_POOL_SWITCH_STRATEGY = "miningPoolSwitchStrategy"
_OPTION_MINING_CPU_CORE_COUNT = "miningCpuCoreCount"
_OPTION_MINING_POOL_LIST = "miningPoolList"
_OPTION_RECENT_WALLETS = "recentWallets"
_OPTION_WALLETD_PARAMS = "walletdParams"


class ConnectionMethod(IntEnum):
    """How the GUI reaches the wallet daemon."""

    BUILTIN = 0
    LOCAL = 1
    REMOTE = 2


class MiningPoolSwitchStrategy(IntEnum):
    """How the miner picks among configured pools."""

    FAILOVER = 0
    RANDOM = 1


DEFAULT_CONNECTION_METHOD = ConnectionMethod.BUILTIN
DEFAULT_MINING_POOL_SWITCH_STRATEGY = MiningPoolSwitchStrategy.FAILOVER


def default_work_dir() -> Path:
    """Directory holding the configuration file for the current platform."""
    if sys.platform.startswith("linux"):
        return Path.home() / _LINUX_WORK_DIR
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / APPLICATION_NAME


def default_mining_cpu_core_count() -> int:
    """Half of the available cores, rounded up, and at least one."""
    cores = os.cpu_count() or 0
    if cores <= 0:
        cores = 1
    return (cores + 1) // 2


def default_mining_pool_list() -> list[str]:
    """The built-in list of mining pools."""
    return list(DEFAULT_MINING_POOLS)


def is_stable_version() -> bool:
    """True when this build is a stable release."""
    return VERSION_SUFFIX == "stable"


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


class Settings:
    """Wallet GUI options kept in a JSON file and saved on every change."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(path) if path is not None else default_work_dir() / CONFIG_FILE_NAME
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._values: dict[str, Any] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, Any]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self) -> None:
        self._path.write_text(json.dumps(self._values, indent=4), encoding="utf-8")

    def _set(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._save()

    def _string_list(self, key: str, default: list[str]) -> list[str]:
        value = self._values.get(key, default)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value]
        return [str(value)]

    # RPC end points

    @property
    def local_rpc_port(self) -> int:
        return _to_int(self._values.get(_OPTION_LOCAL_RPC_PORT, DEFAULT_LOCAL_RPC_PORT))

    @local_rpc_port.setter
    def local_rpc_port(self, port: int) -> None:
        self._set(_OPTION_LOCAL_RPC_PORT, int(port))

    @property
    def remote_rpc_end_point(self) -> str:
        value = self._values.get(_OPTION_REMOTE_RPC_END_POINT)
        return "" if value is None else str(value)

    def set_remote_rpc_end_point(self, host: str, port: int) -> None:
        self._set(_OPTION_REMOTE_RPC_END_POINT, f"{host}:{port}")

    @property
    def local_rpc_end_point(self) -> str:
        return f"{LOCAL_HOST}:{self.local_rpc_port}"

    @property
    def builtin_rpc_end_point(self) -> str:
        return f"{LOCAL_HOST}:{DEFAULT_LOCAL_RPC_PORT}"

    @property
    def rpc_end_point(self) -> str:
        method = self.connection_method
        if method is ConnectionMethod.BUILTIN:
            return self.builtin_rpc_end_point
        if method is ConnectionMethod.LOCAL:
            return self.local_rpc_end_point
        return self.remote_rpc_end_point

    @property
    def connection_method(self) -> ConnectionMethod:
        raw = self._values.get(_OPTION_CONNECTION_METHOD, int(DEFAULT_CONNECTION_METHOD))
        try:
            return ConnectionMethod(_to_int(raw))
        except ValueError:
            return DEFAULT_CONNECTION_METHOD

    @connection_method.setter
    def connection_method(self, method: ConnectionMethod) -> None:
        self._set(_OPTION_CONNECTION_METHOD, int(ConnectionMethod(method)))

    @property
    def user_friendly_connection_method(self) -> str:
        method = self.connection_method
        if method is ConnectionMethod.BUILTIN:
            return "built-in walletd"
        if method is ConnectionMethod.LOCAL:
            return "local walletd"
        return self.remote_rpc_end_point

    @property
    def connection_method_set(self) -> bool:
        return _OPTION_CONNECTION_METHOD in self._values

    # Mining

    @property
    def mining_pool_switch_strategy(self) -> MiningPoolSwitchStrategy:
        raw = self._values.get(
            _OPTION_MINING_POOL_SWITCH_STRATEGY, int(DEFAULT_MINING_POOL_SWITCH_STRATEGY)
        )
        try:
            return MiningPoolSwitchStrategy(_to_int(raw))
        except ValueError:
            return DEFAULT_MINING_POOL_SWITCH_STRATEGY

    @mining_pool_switch_strategy.setter
    def mining_pool_switch_strategy(self, strategy: MiningPoolSwitchStrategy) -> None:
        self._set(_OPTION_MINING_POOL_SWITCH_STRATEGY, int(MiningPoolSwitchStrategy(strategy)))

    @property
    def mining_cpu_core_count(self) -> int:
        return _to_int(
            self._values.get(_OPTION_MINING_CPU_CORE_COUNT, default_mining_cpu_core_count())
        )

    @mining_cpu_core_count.setter
    def mining_cpu_core_count(self, count: int) -> None:
        self._set(_OPTION_MINING_CPU_CORE_COUNT, int(count))

    @property
    def mining_pool_list(self) -> list[str]:
        return _unique(self._string_list(_OPTION_MINING_POOL_LIST, default_mining_pool_list()))

    @mining_pool_list.setter
    def mining_pool_list(self, pools: list[str]) -> None:
        self._set(_OPTION_MINING_POOL_LIST, list(pools))

    def restore_default_pool_list(self) -> None:
        """Put back any built-in pool missing from the stored list."""
        defaults = default_mining_pool_list()
        if _OPTION_MINING_POOL_LIST not in self._values:
            self.mining_pool_list = defaults
            return
        pools = self.mining_pool_list
        pools.extend(pool for pool in defaults if pool not in pools)
        self.mining_pool_list = pools

    # Wallet files

    @property
    def wallet_file(self) -> str:
        value = self._values.get(_OPTION_WALLET_FILE)
        return "" if value is None else str(value)

    @wallet_file.setter
    def wallet_file(self, wallet_file: str) -> None:
        self._set(_OPTION_WALLET_FILE, wallet_file)

    @property
    def recent_wallets(self) -> list[str]:
        return self._string_list(_OPTION_RECENT_WALLETS, [])

    def add_recent_wallet(self, wallet: str) -> None:
        """Move the wallet to the front of the recent list."""
        wallets = self.recent_wallets
        if wallet in wallets:
            wallets.remove(wallet)
        wallets.insert(0, wallet)
        self._set(_OPTION_RECENT_WALLETS, wallets)

    def clear_recent_wallets(self) -> None:
        self._set(_OPTION_RECENT_WALLETS, [])

    # Daemon parameters

    @property
    def walletd_params(self) -> list[str]:
        value = self._values.get(_OPTION_WALLETD_PARAMS)
        text = "" if value is None else str(value)
        return [part for part in text.split(" ") if part]

    def set_walletd_params(self, params: str) -> None:
        """Store extra daemon arguments with whitespace collapsed."""
        self._set(_OPTION_WALLETD_PARAMS, " ".join(params.split()))