"""Work deferred until the request's transaction has committed."""

from collections.abc import Awaitable, Callable

import logfire

AfterCommitHook = Callable[[], Awaitable[None]]


class AfterCommitHooks:
    """Callbacks that run once the request's transaction has committed.

    Side effects that must not be observed before the data they describe
    (cache invalidation) register here. When the transaction rolls back
    the hooks are discarded with the request.
    """

    def __init__(self) -> None:
        self._hooks: list[AfterCommitHook] = []

    def add(self, hook: AfterCommitHook) -> None:
        """Register a callback for after the commit."""
        self._hooks.append(hook)

    async def run(self) -> None:
        """Run and clear every registered callback in registration order."""
        hooks, self._hooks = self._hooks, []
        if hooks:
            logfire.debug("Running after-commit hooks", count=len(hooks))
        for hook in hooks:
            await hook()
