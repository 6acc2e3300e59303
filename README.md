# corvus

Core building blocks for a small engine runtime, using only the standard library.

- `corvus.hashing`: `fnv1a(data, bits=32)`, FNV-1a hashing of text (as UTF-8) or bytes in 32 or 64 bits.
- `corvus.names`: `Name`, a string identified by its 32-bit FNV-1a hash, and `NameStringPool`, which maps hashes back to strings. `Name()` is invalid (hash 0); any string, even an empty one, makes a valid name.
- `corvus.strings`: `format_string` (brace formatting, booleans render as `true`/`false`), `convert` (text to UTF-8 bytes and back) and `to_string` (numbers in decimal, floats with six decimals).
- `corvus.guid`: `Guid`, four 32-bit words, with `parse` (raises `ValueError` on a malformed string), `from_string` (gives the invalid GUID instead), `new_guid`, `to_string`, `is_valid` and `invalidate`.
- `corvus.delegates`: `Delegate` (one callable, `bind`/`bind_member`/`execute`/`unbind`), `MulticastDelegate` (many callables, `add_binding`/`remove_binding`/`broadcast`) and `DelegateHandle`.
- `corvus.timing`: typed durations `NanoSeconds`, `MicroSeconds`, `MilliSeconds` (integer counts) and `Seconds`, `Minutes`, `Hours` (fractional counts), with conversion, arithmetic and comparison across types; `TimePoint`, nanosecond ticks on the monotonic clock.
- `corvus.sync`: `CriticalSection` and `Mutex` (recursive locks, also usable as context managers), `ConditionVariable` (`wait`, `wait_for` with an optional predicate and a `Duration` or seconds timeout) and `ScopedLock`.
- `corvus.logger`: `LogChannel`, `LogSeverity`, `setup`, `destroy` and `log`, writing to standard output through a background writer once `setup` has run.
- `corvus.stackwalker`: `StackWalker`, `StackWalkerConfig` and `StackFrame`, capturing and formatting the Python call stack.
- `corvus.crash`: `verify`, which raises `EngineAssertionError` carrying an `AssertionData`; `CrashHandler`, which reports errors to the log and standard error and records exit code 1; and `guarded_execute`.
- `corvus.subsystems`: the abstract `Subsystem` and `SubsystemCollection`, keyed by a `Name`, a string or a class (named by `type_name_without_prefix`, which drops the first letter of the class name).
- `corvus.engine`: the `Engine` singleton (`get_engine()`), which owns a `SubsystemCollection` between `initialize` and `shutdown`.

## Installation

```
pip install .
```

For tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from corvus.guid import Guid

guid = Guid.from_string("12345678-9abc-def0-1234-567890abcdef")
assert guid.to_string() == "12345678-9abc-def0-1234-567890abcdef"
```

```python
from corvus.delegates import MulticastDelegate

on_score = MulticastDelegate()
handle = on_score.add_binding(lambda points: print("scored", points))
on_score.broadcast(100)
on_score.remove_binding(handle)
```

```python
from corvus.timing import Seconds, MilliSeconds, TimePoint

total = Seconds(1.0) + MilliSeconds(500)
assert total.count() == 1.5
later = TimePoint.from_duration(Seconds(10.0)) + Seconds(5.0)
```

```python
from corvus.sync import ConditionVariable, CriticalSection, ScopedLock

section = CriticalSection()
ready = ConditionVariable()
with ScopedLock(section):
    ready.wait_for(section, 0.01, lambda: False)  # False once the time runs out
```

```python
from corvus.engine import get_engine
from corvus.subsystems import Subsystem

class AudioSubsystem(Subsystem):
    def initialize(self):
        print("audio up")

    def deinitialize(self):
        print("audio down")

engine = get_engine()
engine.initialize()
engine.register_subsystem_type(AudioSubsystem)
engine.shutdown()
```

## Command

Running `corvus` sets up logging and crash handling, initializes the engine, shuts it down again and exits with the crash handler's exit code (0, or 1 if an error was handled). Command-line arguments are ignored.

```
corvus
```

## What it does not do

The engine has no main loop, window, rendering, audio or input; it only holds the subsystems you register. The `corvus` command therefore starts and stops at once. Crash reports are written to the log and standard error rather than shown in a dialog.