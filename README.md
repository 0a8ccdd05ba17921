# meridianscan

A small library for working with meridian-point conductance scans. It models
24 measurement points, six on each hand (`h1` to `h6`) and six on each foot
(`f1` to `f6`), for both the left and the right side. Keys look like
`h1Left` or `f6Right`. A scan is turned into indicators, chart data and
plain-language recommendations.

The package has no third-party dependencies.

## Installation

```
pip install .
```

Run the test suite with:

```
pip install .[test]
pytest
```

## Modules

### `meridianscan.scan_session`

- `ScanSession(date=None)` holds one scan. `date` is a string; when it is
  omitted, the current local time is used in the form `YYYY-MM-DD HH:MM:SS`.
  All 24 points start at `0.0`.
- `set_point(key, value)` and `get_point(key)` raise `ValueError` for a key
  that is not one of the 24 meridian points.
- `meridian_points()` returns a copy of all readings as a dict ordered by key.
- `MERIDIAN_KEYS` lists the 24 point keys.

### `meridianscan.historical_data`

- `SessionRecord` is a named tuple of `name`, `date` and `scan`.
- `HistoricalData()` is an ordered history. `add(name, date, scan)` appends
  a record and returns it; `remove(name)` deletes every record with that
  name; `sessions()` returns a list copy. The history can be iterated and
  measured with `len()`.

### `meridianscan.profile`

- `conductance_range(age, weight)` returns the `(min, max)` normal
  conductance range for an age and weight.
- `Profile(profile_name, gender, weight, age, height, ...)` is a dataclass for
  a person being measured. It also carries `birth_date`,
  `conductance_norm_min`, `conductance_norm_max` (both `0.0` until
  calculated) and `current_scan_session`.
  `calculate_conductance_range()` sets the two norm fields from age and
  weight.

### `meridianscan.user`

- `User(age, first_name, last_name, gender, weight, height, birth_date, email, password)`
  is a dataclass for an account holder with a `historical_data` history and a
  `profiles` list.
- `save_session_to_history(name, date, scan)` records a scan in the history.
- `add_profile(profile)` adds a profile unless five are already held and
  returns whether it was added.
- `get_profile(name)` returns the first profile with that name, or `None`.
- `update_profile(profile_name, new_profile_name, new_weight, new_gender, new_height, age)`
  changes the first matching profile and returns it, or `None` if there is
  none.
- `remove_profile(name)` removes every profile with that name.

### `meridianscan.indicators`

- `Status` is an `IntEnum`: `INSUFFICIENT` (0), `HYPERACTIVE` (1) and
  `NORMAL` (2).
- `classify(value, norm_max, norm_min)` compares a value with the range; the
  bounds themselves count as normal.
- `Indicators(meridian_points)` computes:
  - averages, each also classified: `calculate_energy_level` (all points,
    divided by 24), `calculate_immune_system`, `calculate_metabolism`,
    `calculate_psycho_emotional` and `calculate_musculoskeletal`, each taking
    `(norm_max, norm_min)`;
  - sums: `calculate_left_meridian`, `calculate_right_meridian`,
    `calculate_upper_meridian` (hands) and `calculate_lower_meridian` (feet).

  Each method returns its value. The `processed_data` property holds every
  indicator (all `0.0` until calculated) and `status` holds the statuses
  calculated so far.

### `meridianscan.diagrams`

- `Diagrams(meridian_points)`:
  - `calculate_body_chart_data(norm_max, norm_min)` classifies each organ on
    each side, with keys such as `lungL`, `heartR` or `gBladderL`, and returns
    the result. It is also available as `body_chart_data`.
  - `calculate_bar_chart_data(norm_max, norm_min)` gives each point as a
    percentage of the midpoint of the range, and returns the result. It is
    also available as `bar_chart_data`. It raises `ValueError` if the
    midpoint is zero.

### `meridianscan.recommendations`

- `Recommendations(meridian_points)`:
  - `calculate_abnormities(norm_max, norm_min)` judges each organ from its
    left and right readings and appends a message for every organ working
    insufficiently, hyperactively or irregularly, in a fixed organ order from
    lung to stomach. It returns all messages so far.
  - `recommendations()` returns those messages. Each ends with a newline.

## Example

```python
from meridianscan.profile import Profile
from meridianscan.scan_session import ScanSession
from meridianscan.indicators import Indicators
from meridianscan.recommendations import Recommendations

profile = Profile("Alex", "Female", weight=60, age=30, height=170.0)
profile.calculate_conductance_range()   # range (55, 80)

scan = ScanSession("2024-01-01 09:00:00")
for key in scan.meridian_points():
    scan.set_point(key, 65.0)
scan.set_point("h1Left", 20.0)

points = scan.meridian_points()
indicators = Indicators(points)
indicators.calculate_energy_level(profile.conductance_norm_max,
                                  profile.conductance_norm_min)

advice = Recommendations(points)
advice.calculate_abnormities(profile.conductance_norm_max,
                             profile.conductance_norm_min)
for line in advice.recommendations():
    print(line, end="")
# The lung is working insufficiently, if abnormities persist over time, ...
```

## What this package does not do

It is a library only. It has no command-line program and no graphical
screens. It does not talk to a measuring device: readings are set by hand
with `ScanSession.set_point`. Users, profiles and history are kept in memory
only; nothing is saved to disk or to a database.