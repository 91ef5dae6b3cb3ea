# dogewallet

The logic behind a desktop wallet for a CryptoNote-style coin, with no
user interface attached. The package uses only the standard library.

## What it contains

- `dogewallet.settings`: the `Settings` class keeps the wallet file, the RPC
  connection method (`ConnectionMethod`), the local and remote RPC end
  points, the mining pool list and switch strategy
  (`MiningPoolSwitchStrategy`), the mining core count, recent wallets and
  extra walletd parameters in a JSON file. It saves on every change. Without
  a path it uses `GoldenDoge-gui.config` in `default_work_dir()`, which it
  creates. Also has `default_mining_cpu_core_count()`,
  `default_mining_pool_list()` and `is_stable_version()`.
- `dogewallet.amounts`: `parse_amount()` turns decimal text such as `"1.25"`
  into atomic units and raises `AmountError` on bad input.
  `fee_for_slider()` gives the fee per byte for a slider position from 1 to 4,
  as 50%, 100%, 150% or 200% of the recommended fee. `Recipient` holds one
  destination of a payment.
- `dogewallet.sendform`: `SendForm` holds the recipients, which are never
  fewer than one, and a payment id. It sums the entered amounts and builds a
  `Transaction` together with its fee per byte.
- `dogewallet.records`: dataclasses for the data a wallet daemon returns:
  `Transfer`, `Transaction`, `Block`, `Transfers`, `Addresses`, `Status`,
  `Balance` and `TransfersRequest`.
- `dogewallet.history`: `TransactionHistory` merges pages of history, keeping
  unconfirmed transactions ahead of confirmed ones. `row_change()` works out
  which table rows are inserted or removed when a column of data is resized.
- `dogewallet.status`: `format_time_diff()` and `describe_status()` produce
  the synchronisation text for a status bar. The result is a
  `StatusDescription`.
- `dogewallet.windowed`: `WindowFilter` keeps the rows whose position, or
  role value, falls inside a window.
- `dogewallet.quitsignal`: `QuitSignalHandler` sends SIGINT and SIGTERM to
  callbacks you connect, and ignores SIGPIPE where the platform has it.

## Examples

Parse an amount and pick a fee:

```python
from dogewallet.amounts import parse_amount, fee_for_slider

atomic = parse_amount("1.5", 8)      # 150000000
fee = fee_for_slider(3, 700)         # 1050
```

Keep settings in a file of your choice:

```python
from dogewallet.settings import Settings, ConnectionMethod

settings = Settings("wallet-gui.config")
settings.connection_method = ConnectionMethod.REMOTE
settings.set_remote_rpc_end_point("127.0.0.1", 4042)
settings.add_recent_wallet("/home/me/main.wallet")
print(settings.rpc_end_point)        # "127.0.0.1:4042"
print(settings.recent_wallets)       # ["/home/me/main.wallet"]
```

Fill in a send form:

```python
from dogewallet.sendform import SendForm

form = SendForm(8)
recipient = form.add_recipient("recipient-address")
recipient.amount_text = "2.5"
transaction, fee_per_byte = form.build_transaction(2)
```

Describe how long ago a block arrived:

```python
from dogewallet.status import format_time_diff

print(format_time_diff(3 * 3600 + 5 * 60))   # "3 hours 5 minutes"
```

Select a window of rows:

```python
from dogewallet.windowed import WindowFilter

WindowFilter(window_size=2, window_begin=1).filter(["a", "b", "c", "d"])  # ["b", "c"]
```

## What it does not do

The package has no user interface and no command to run. It does not talk to
a wallet daemon: it has no RPC client, does not start or watch a daemon
process, and has no connection state machine. You bring the `records`
objects in from whatever client you use. It has no mining code and no table
model that turns wallet data into display columns.

## Tests

The tests use pytest and come with the `test` extra.