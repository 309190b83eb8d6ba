# nacos-kit

Building blocks for service-discovery and configuration clients. The package has
no third-party dependencies.

## Modules

- `nacos_kit.uuidkit`: an immutable 16-byte `UUID` value.
  - `from_string` parses canonical (`6ba7b810-9dad-11d1-80b4-00c04fd430c8`),
    braced (`{...}`), URN (`urn:uuid:...`) and hash-like (32 hex digits) text;
    `from_bytes` takes exactly 16 raw bytes. Both raise `UUIDError` (a
    `ValueError`) on bad input; `from_string_or_nil` and `from_bytes_or_nil`
    return `NIL` instead.
  - `UUID.version()`, `UUID.variant()`, and `with_version` / `with_variant`,
    which return modified copies.
  - `str(u)`, `bytes(u)`, `marshal_text()`, `marshal_binary()`, `equal(u1, u2)`.
  - Enums `Version`, `Variant` and `Domain`, plus the constants `NIL`,
    `NAMESPACE_DNS`, `NAMESPACE_URL`, `NAMESPACE_OID` and `NAMESPACE_X500`.
- `nacos_kit.generator`: UUID generation for versions 1 to 5 with `new_v1()`,
  `new_v2(domain)`, `new_v3(ns, name)`, `new_v4()` and `new_v5(ns, name)`.
  - `Generator(epoch_func, hw_addr_func, rand)` lets you supply your own clock
    (nanoseconds since the Unix epoch), hardware-address source and random
    source.
  - If no hardware address is available, a random one with the multicast bit set
    is used instead.
  - `default_hw_addr()` returns this host's 6-byte hardware address, or raises
    `UUIDError`.
- `nacos_kit.uuid_sql`: converts UUIDs to and from database values.
  - `value(u)` returns the text form.
  - `scan(src)` accepts 16 raw bytes, text as bytes, or a `str`. Any other type
    raises `UUIDError`.
  - `NullUUID` holds a UUID that may be NULL: its `value()` returns `None` when
    it is not valid, and `scan(None)` resets it.
- `nacos_kit.model`: dataclasses for configuration items and pages, services,
  instances, clusters, heartbeats (`BeatInfo`), selectors and service lists.
  - `Instance` and `Service` have `to_dict()` / `from_dict()` that use JSON field
    names such as `instanceId` and `clusterName`.
  - `BeatInfo.to_dict()` leaves out the local-only `period` and `state`.
- `nacos_kit.params`: request parameter dataclasses. Examples are `ConfigParam`,
  `SearchConfigParam`, `RegisterInstanceParam`, `DeregisterInstanceParam`,
  `UpdateInstanceParam`, `GetServiceParam`, `SubscribeParam` and the
  `Select*Param` classes.
- `nacos_kit.object2param`: `transform_object_to_param` turns a parameter
  dataclass into a `dict[str, str]`, keyed by each field's request name.
  - Booleans become `"true"` / `"false"` and mappings become compact JSON.
  - String lists are joined with commas.
  - Empty strings, empty lists and `None` mappings are left out.
- `nacos_kit.common`:
  - `current_millis()`
  - `json_to_service(text)`, which returns a `Service`, or `None` if the text
    cannot be decoded
  - `to_json_string(obj)`
  - `local_ip()`, which returns a non-loopback IPv4 address or `""`
  - `get_duration_with_default(metadata, key, default)`, which reads a
    nanosecond count into a `timedelta`
  - `get_url_formed_map(mapping)`, which returns a query string sorted by key
  - `get_status_code(response)`, which returns `"NA"` for `None`
  - `deep_copy_map(mapping)`
- `nacos_kit.textutil`:
  - `md5(text)` returns a lowercase hex digest.
  - `truncate_content(text)` keeps at most the first 100 UTF-8 bytes.
- `nacos_kit.semaphore`: a counting `Semaphore` with blocking `acquire()`,
  non-blocking `try_acquire()`, `release()` and `available_permits()`.
  - It can also be used as a context manager.
  - Releasing more permits than were taken raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from nacos_kit.uuidkit import NAMESPACE_DNS
from nacos_kit.generator import new_v4, new_v5

print(new_v5(NAMESPACE_DNS, "www.example.com"))  # 2ed6657d-e927-568b-95e1-2665a8aea6a2
print(new_v4().version())  # 4
```

```python
from nacos_kit.textutil import md5
from nacos_kit.params import RegisterInstanceParam
from nacos_kit.object2param import transform_object_to_param

print(md5("demo"))  # fe01ce2a7fbac8fafaed7c982a04e229

param = RegisterInstanceParam(ip="10.0.0.10", port=8848, weight=1.0,
                              enable=True, healthy=True, service_name="demo")
print(transform_object_to_param(param))
```

```python
from nacos_kit.semaphore import Semaphore

sem = Semaphore(2)
if sem.try_acquire():
    try:
        ...
    finally:
        sem.release()

with sem:
    print(sem.available_permits())  # 1
```

## What this package does not do

The package provides data types and helpers only.

- It has no client that talks to a registry or configuration server.
- Nothing here registers instances, sends heartbeats, publishes, fetches or
  listens to configurations, or delivers subscription callbacks.
- The parameter and model classes describe those requests and responses, but
  sending them is up to you.
- There is no command-line tool.