"""Contract for one persisted GraphQL operation.

Why a Protocol:
- Each remote query is one small class (name + variables + extensions +
  response model); the executor never changes when a query is added.
- The response type differs per operation and is known at the call site, so
  the executor is generic over it instead of dispatching dynamically.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

VariablesT_co = TypeVar("VariablesT_co", covariant=True)
ExtensionsT_co = TypeVar("ExtensionsT_co", covariant=True)
ResponseT_co = TypeVar("ResponseT_co", covariant=True)


@runtime_checkable
class GraphQLOperation(Protocol[VariablesT_co, ExtensionsT_co, ResponseT_co]):
    """Minimal descriptor of a remote call.

    Rules:
    - `operation_name` goes verbatim into the query string.
    - `response_model` is the pydantic model the envelope's `data` decodes to.
    - `extensions()` builds a fresh value on each call; the persisted-query
      hash is operation specific and may be computed.
    """

    @property
    def operation_name(self) -> str: ...

    @property
    def response_model(self) -> type[ResponseT_co]: ...

    def variables(self) -> VariablesT_co: ...

    def extensions(self) -> ExtensionsT_co: ...
