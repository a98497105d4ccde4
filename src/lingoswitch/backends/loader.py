# Copyright 2025 KTTC AI (https://github.com/kttc-ai)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Backend selection by import path."""

from __future__ import annotations

import importlib
import logging
from typing import Any

from .base import BackendLoadError, TranslationBackend

logger = logging.getLogger(__name__)

# Short names accepted in place of an import path
_BUILTIN_BACKENDS: dict[str, str] = {
    "demo": "lingoswitch.backends.demo:DemoBackend",
}


def load_backend(path: str, **kwargs: Any) -> TranslationBackend:
    """Import and instantiate a backend.

    Args:
        path: ``package.module:ClassName`` or a built-in short name ("demo")
        **kwargs: Constructor arguments

    Returns:
        Backend instance

    Raises:
        BackendLoadError: If the path is malformed, cannot be imported, or
            does not name a TranslationBackend subclass

    Example:
        >>> backend = load_backend("demo")
        >>> type(backend).__name__
        'DemoBackend'
    """
    path = _BUILTIN_BACKENDS.get(path, path)
    module_name, sep, class_name = path.partition(":")
    if not sep or not module_name or not class_name:
        raise BackendLoadError(f"Backend path must look like 'package.module:ClassName': {path}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise BackendLoadError(f"Cannot import backend module {module_name}: {e}") from e

    backend_class = getattr(module, class_name, None)
    if not isinstance(backend_class, type) or not issubclass(backend_class, TranslationBackend):
        raise BackendLoadError(f"{path} is not a TranslationBackend subclass")

    try:
        backend = backend_class(**kwargs)
    except Exception as e:
        raise BackendLoadError(f"Failed to create backend {path}: {e}") from e

    logger.info("Using translation backend: %s", path)
    return backend
