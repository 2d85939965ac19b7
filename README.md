# opcuadiag

The state and logic behind the panels of a read-only OPC-UA diagnostic and
monitoring tool. It draws nothing itself. Each panel class keeps what the user
has entered or chosen, and each control becomes a method call. The call returns
a small frozen action object that your application carries out.

The package has no third-party dependencies.

## Modules

### `opcuadiag.status_codes`

- `translate_status_code(code)` gives a readable text for a 32-bit OPC-UA
  status code. For an unknown code it gives the severity with the hex value,
  for example `"Bad (0x80FF0000)"`.
- `status_code_color(code)` gives an RGB tuple for the code's severity: green
  for Good, amber for Uncertain, red for Bad.

Both raise `ValueError` for a value outside the 32-bit range.

### `opcuadiag.trending`

- `TrendingPanel(time_window=60)`. The window must be one of `TIME_WINDOWS`
  (30, 60, 300, 600 seconds). `set_time_window(seconds)` checks the value the
  same way. `window_bounds(now)` returns `(now - window, now)`.
  `visible_points(history, now)` keeps the `(t, v)` points inside the window.
  `trend_series(monitored_items, now)` returns a `TrendSeries` for every item
  that is shown in the trend, is trendable and has history.
- `color_for_node_id(node_id)` gives a stable RGB colour derived from the node
  id's text.
- `format_time(timestamp)` formats epoch seconds as a UTC `HH:MM:SS` time of day.

### `opcuadiag.monitor`

- `MonitorPanel.rows(monitored_items)` returns `MonitorRow`s sorted by display
  name. Each row carries its value, quality label and colour, status text,
  timestamp and trend colour.
- `MonitorPanel.toggle_trend(node_id, item)` raises `ValueError` for values
  that are not numeric. `change_color(node_id, rgb)` accepts only colours in
  `PALETTE`. `remove(node_id)` is also available. Each of these returns a
  `MonitorAction` with a `MonitorActionKind`.
- `quality_label(quality_icon)` and `trend_color(node_id, item)` are helpers.

### `opcuadiag.notifications`

- `ErrorPanel` keeps notifications with the newest first and holds at most 10.
  Add to it with `add_error(message, severity)` or
  `add_error_with_details(message, details, severity)`, and empty it with
  `clear()`. `has_active_toasts(now)` tells whether any notification is still
  recent enough for a toast. `active_toasts(now)` returns at most 3 of them.
- `ErrorNotification` shows as a toast for 5 seconds.
  `toast_alpha(now)` fades it out over the last second, and `age_text(now)`
  gives text such as `"12s ago"` or `"3m ago"`.
- `ErrorSeverity` (`INFO`, `WARNING`, `ERROR`) has `icon()` and `color()`.
- `get_common_errors(lang)` lists `(code, description, solution)` for frequent
  OPC-UA errors. `lang` is a `Language` (`ENGLISH` or `SPANISH`).

### `opcuadiag.properties`

- `PropertiesPanel(selected_node, monitored_data)`. `rows()` gives the
  `(label, value)` pairs for the property grid. `can_watch()` is true for a
  selected variable node, and `add_to_watchlist()` returns a
  `PropertiesAction`. It raises `ValueError` when the node cannot be watched.

### `opcuadiag.tree_view`

- `TreeView(node_cache, selected_node_id)` has these methods:
  - `label(node)` and `is_selected(node)` describe how a node is shown.
  - `context_actions(node)` gives export actions for objects and nodes with
    children, and watchlist actions for variables.
  - `click(node)` returns a select action.
  - `double_click(node)` also adds a leaf variable to the watchlist.
  - `expand(node)` asks for children that are not cached yet.

  These return `TreeViewAction`s.

### `opcuadiag.connection`

- `ConnectionPanel` holds the connection form, the diagnostic log and the
  discovered endpoints.
  - `request_diagnostic`, `cancel_diagnostic`, `connect` and `disconnect`
    return `ConnectionAction`s.
  - `select_endpoint(index)` takes over an endpoint's security policy and mode
    and locks them.
  - `load_bookmark(bookmark)` fills the form from a saved server.
  - `resolve_endpoint_url()` prefers the diagnostic's recommended URL.
    Otherwise it adds `opc.tcp://` to the input, and adds port 4840 when the
    input has no port.
- `SecurityPolicy.from_endpoint_name(name)` and
  `MessageSecurityMode.from_endpoint_name(name)` map the names that endpoints
  report.

### `opcuadiag.crawler_panel`

- `CrawlerPanel` holds a `CrawlConfig`. The defaults are depth 5, 500 000
  nodes, starting from `i=84`. `set_max_depth(depth)` accepts 1–10.
  - `start_crawl(now)`, `finish(results)` and `elapsed_text(now)` follow the
    progress of a crawl.
  - `summary()` gives the completion line.
  - `export_json()` and `export_csv()` return `CrawlerAction`s and raise
    `ValueError` when there are no results.

### `opcuadiag.certificates_panel`

- `CertificatesPanel(cert_manager)` lists the client, trusted and rejected
  certificates of the store object you pass in. `handle_action(CertAction(...))`
  trusts, deletes, opens the PKI folder or refreshes. Its `status` reports the
  outcome, and an error from the store is caught and shown there.

## Inputs are duck-typed

The panels work on objects you supply.

- Monitored items provide:
  - `display_name`, `status`, `show_in_trend`, `trend_color` and `history`
  - `value_string()`, `quality_icon()`, `timestamp_string()` and
    `is_trendable()`
- Browsed nodes provide `node_id`, `display_name`, `browse_name`,
  `node_class` and `has_children`, and may have `type_definition`.
- The certificate store provides the methods that `CertificatesPanel` calls.

## Example

```python
from opcuadiag.status_codes import translate_status_code
from opcuadiag.connection import ConnectionPanel

translate_status_code(0x801C0000)   # "Bad - Certificate Untrusted"
translate_status_code(0x80FF0000)   # "Bad (0x80FF0000)"

panel = ConnectionPanel(server_input="192.168.1.100")
panel.resolve_endpoint_url()        # "opc.tcp://192.168.1.100:4840"
action = panel.connect(is_connected=False, app_busy=False)
action.kind                         # ConnectionActionKind.CONNECT
```

## What this package does not do

- It has no user interface and no command to start.
- It has no OPC-UA client. It does not connect, browse, subscribe or crawl
  itself.
- It runs no network diagnostics.
- It does not manage certificates on disk.
- It does not store bookmarks.
- It does not write export files.

These belong to the application that uses the panels, which carries out the
actions they return.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```