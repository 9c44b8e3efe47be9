"""
Client session module: the call state machine and its runtime seam.

Key components:
- controller: ``CallSessionController``, which turns user actions and runtime
  events into observable ``CallState``.
- runtime: ``CallRuntime``, the base class for provider media runtimes, and
  ``StartCallOptions``.

Usage examples:
```python
from webcall.config.settings import ClientSettings
from webcall.session import CallSessionController

async with CallSessionController.from_settings(ClientSettings.from_env(), runtime) as controller:
    controller.add_listener(render)
    await controller.start()
```
"""

from webcall.session.controller import CallSessionController
from webcall.session.runtime import CallRuntime, StartCallOptions
