"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_RESPONSE = """\
# Overview

Here is a **short** answer with `code` and *emphasis*.
It continues on a second line.

## Steps

1. Install the package
2. Run it
- top level
    - nested twice

> Quoted _note_

```python
print("hello")
```

---

Done."""


@pytest.fixture(name="sample_response")
def sample_response_fixture():
    return SAMPLE_RESPONSE
