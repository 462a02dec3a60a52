# Copyright 2025 The Sigstore Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration of how algorithms are resolved.

By default every algorithm implemented by a provider is resolved as supported.
Algorithms can be turned off, in which case they resolve to the unsupported
variant, exactly as if no provider implemented them:

```python
config = crypto_primitives.config.Config().set_disabled_algorithms(
    ["ecdh-p521", "ecdsa-p521-sha256"]
)
```

The process-wide algorithm constants are resolved with `Config.from_env()`,
which reads the comma separated list of names in the
`CRYPTO_PRIMITIVES_DISABLED_ALGORITHMS` environment variable.
"""

from collections.abc import Iterable, Mapping
import os
import sys


if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


DISABLED_ALGORITHMS_ENV = "CRYPTO_PRIMITIVES_DISABLED_ALGORITHMS"


class Config:
    """Configuration to use when resolving algorithms."""

    def __init__(self):
        """Initializes the default configuration, with nothing disabled."""
        self._disabled_algorithms = frozenset()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> Self:
        """Builds a configuration from environment variables.

        Args:
            environ: The environment to read. Defaults to `os.environ`.

        Returns:
            The new configuration.
        """
        config = cls()
        value = environ.get(DISABLED_ALGORITHMS_ENV, "")
        return config.set_disabled_algorithms(value.split(","))

    def set_disabled_algorithms(self, names: Iterable[str]) -> Self:
        """Forces the named algorithms to resolve as unsupported.

        Names are stripped of surrounding whitespace; empty names are ignored.

        Args:
            names: The names of the algorithms to disable.

        Returns:
            The new configuration.
        """
        self._disabled_algorithms = frozenset(
            name.strip() for name in names if name.strip()
        )
        return self

    @property
    def disabled_algorithms(self) -> frozenset[str]:
        return self._disabled_algorithms

    def is_disabled(self, name: str) -> bool:
        return name in self._disabled_algorithms
