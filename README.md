# mondrianhal

This is a plain Python library of support code for a tablet's hardware services.
It needs nothing outside the standard library. Every module logs through the
standard `logging` module, under loggers named `mondrianhal.*`.

## Modules

### `mondrianhal.linked_list`

`LinkedList` adds items at the head with `add(data, dealloc=None)` and takes
them from the tail with `remove()`, so items come out oldest first.

- `flush()` drops every item. It calls each item's `dealloc` function, if the
  item has one.
- `search(equal, key, remove=False, keep=True)` returns the first item, counted
  from the head, for which `equal(key, item)` is true. It returns `None` when no
  item matches. With `remove=True` the matching item is taken out of the list.
  If `keep` is also false, that item's `dealloc` is called as well.
- `remove()` and `search()` raise `ListEmptyError` on an empty list.
- `add(None)` raises `ValueError`.
- The list supports `len()`, iteration and `is_empty()`.

### `mondrianhal.msg_q`

`MessageQueue` is a thread-safe first-in, first-out queue.

- `send(msg, dealloc=None)` adds a message.
- `receive()` returns the oldest message. When the queue is empty it waits until
  a message arrives.
- `flush()` drops all queued messages and calls their `dealloc` functions.
- `unblock()` stops the queue and wakes every waiting receiver. After that,
  `send`, `receive` and a second `unblock` raise `QueueUnblockedError`.
- `close()` releases all queued messages and retires the queue. Using the queue
  after `close()` raises `RuntimeError`.
- The queue is a context manager that calls `close()` on exit.
- `MsgQStatus` lists the queue's status codes.

### `mondrianhal.loc_target`

This module works out where the GNSS engine lives.

- `target_set(gnss, ssc)` combines a `GnssTarget` and an `SscType` into a target
  code. `gnss_type(target)` splits the GNSS part back out.
- `TargetDetector(properties, root, sleep)` reads the detection inputs:
  - `persist.qca1530` and `ro.baseband` from a properties mapping;
  - the sysfs `hw_platform` and `soc_id` files under `root`.
- `get_target()` returns a code such as `TARGET_MSM_NO_SSC` or `TARGET_UNKNOWN`
  and remembers it for later calls.
- `read_a_line(path, line_size)` returns the first line of a file.

### `mondrianhal.loc_log`

This module turns codes into readable names for log lines.

- `name_from_val` and `name_from_mask` look values up in `(name, value)` tables.
- `msg_q_status_name(status)` names a queue status code.
- `target_name(target)` describes a target code, for example `" GNSS_MSM with SSC"`.
- `succ_fail_string(is_succ)` returns `"successful"` or `"failed"`.
- `get_time(now)` returns the local time as `HH:MM:SS.mmm`.

### `mondrianhal.logutil`

- `LocLogger` holds the debug level and the timestamp switch.
  `configure(debug_level, timestamp)` sets both.
- `get_timestamp(now)` formats a time as `HH:MM:SS.uuuuuu`.
- `format_flow`, `log_entry` and `log_exit` build call-flow lines and return
  them. When the logger's timestamp switch is on, each line starts with a
  timestamp.

### `mondrianhal.loc_cfg`

`read_conf(path, table=None, logger=None)` reads a file of `NAME = value` lines
into a list of `ConfigParam` entries.

- Each entry has a type: `'n'` for an integer, `'s'` for a string or `'f'` for a
  float.
- `was_set` on an entry records whether the last file read assigned it.
- A value that starts with `0x` is read as hexadecimal.
- For a string entry, the value `NULL` stores an empty string.
- `DEBUG_LEVEL` and `TIMESTAMP` in the file configure the logger.
- `read_conf` returns `False` if the file cannot be opened, and `True` otherwise.

The lower-level pieces are available on their own: `parse_value`,
`set_config_entry`, `trim_space` and `ConfigValue`.

### `mondrianhal.loc_timer`

`loc_timer_start(msec, callback, user_data=None)` starts a one-shot `LocTimer` and
returns it. Once the delay passes, the timer calls
`callback(user_data, errno.ETIMEDOUT)` on its own thread. Calling `stop()` before
that cancels the call.

### `mondrianhal.lights`

`Lights(panel_file, button_file)` drives two sysfs brightness files.

- `open(name)` returns the setter for `"backlight"`, `"buttons"`, `"battery"`,
  `"notifications"` or `"attention"`. Any other name raises `ValueError`.
- The backlight setter writes the colour's luminance, as given by
  `rgb_to_brightness`.
- The button setter writes `1` for any non-black colour and `0` for black.
- The battery, notification and attention lights have no hardware. Their
  colours are only recorded in `Lights.unbacked`.
- `write_int` raises `OSError` when a file cannot be written.

### `mondrianhal.power`

`InputPower(prefix)` scans up to 20 `<prefix>N/name` files to find the
`sec_touchscreen` and `gpio-keys` input devices.

- `set_interactive(on)` writes `1` or `0` to their `enabled` files.
- `sysfs_read` and `sysfs_write` log failures instead of raising them.

### `mondrianhal.wcnss`

`get_wlan_address(path)` reads an address written as `XX:XX:XX:XX:XX:XX` and
returns it as six bytes. It raises `OSError` if the file cannot be opened, and
`ValueError` if the contents are malformed.

### `mondrianhal.init_props`

`init_msm_properties(properties, target="msm8974")` works on a properties
mapping.

- It acts only when `ro.board.platform` equals `target`. Otherwise it returns
  `None`.
- It checks `ro.bootloader`: the build fingerprint, description, model and
  device properties are set for the `T320UE` variant when the bootloader names
  it, and for the `XX` variant otherwise.
- It returns the device name it set.

## Examples

```python
from mondrianhal.msg_q import MessageQueue

with MessageQueue() as q:
    q.send("hello")
    print(q.receive())
```

```python
from mondrianhal.loc_cfg import ConfigParam, read_conf

table = [ConfigParam("INTERMEDIATE_POS", "n")]
if read_conf("/etc/gps.conf", table):
    print(table[0].value, table[0].was_set)
```

## What it does not do

The package has no command-line program and no service of its own. It does not
run a location engine, talk to a modem or report position fixes. It provides
only the helpers listed above, for code that does those things.

## Running the tests

```
pip install -e .[test]
pytest
```