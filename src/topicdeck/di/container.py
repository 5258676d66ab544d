from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Set, Type

from .lifetime import Lifetime
from ..errors import CircularDependencyError, ResolutionError


@dataclass
class Registration:
    interface: Type
    implementation: Optional[Type] = None
    lifetime: Lifetime = Lifetime.TRANSIENT
    factory: Optional[Callable[[Container], Any]] = None
    kwargs: Dict[str, Any] = field(default_factory=dict)


class Container:
    """Minimal service container.

    Factories receive the container so they can resolve their own
    collaborators; a factory that ends up resolving itself raises
    ``CircularDependencyError``.
    """

    def __init__(self) -> None:
        self._registrations: Dict[Type, Registration] = {}
        self._singleton_instances: Dict[Type, Any] = {}
        self._resolving: Set[Type] = set()

    def register_singleton(self, interface: Type, implementation: Optional[Type] = None, **kwargs) -> None:
        self._registrations[interface] = Registration(
            interface=interface,
            implementation=implementation or interface,
            lifetime=Lifetime.SINGLETON,
            kwargs=kwargs,
        )

    def register_transient(self, interface: Type, implementation: Optional[Type] = None, **kwargs) -> None:
        self._registrations[interface] = Registration(
            interface=interface,
            implementation=implementation or interface,
            lifetime=Lifetime.TRANSIENT,
            kwargs=kwargs,
        )

    def register_factory(
        self,
        interface: Type,
        factory: Callable[[Container], Any],
        lifetime: Lifetime = Lifetime.SINGLETON,
    ) -> None:
        self._registrations[interface] = Registration(
            interface=interface, lifetime=lifetime, factory=factory
        )

    def register_instance(self, interface: Type, instance: Any) -> None:
        self._registrations[interface] = Registration(interface=interface, lifetime=Lifetime.SINGLETON)
        self._singleton_instances[interface] = instance

    def is_registered(self, interface: Type) -> bool:
        return interface in self._registrations

    def resolve(self, interface: Type) -> Any:
        reg = self._registrations.get(interface)
        if reg is None:
            raise ResolutionError(f"No registration found for {interface}")
        if reg.lifetime == Lifetime.SINGLETON and interface in self._singleton_instances:
            return self._singleton_instances[interface]

        if interface in self._resolving:
            raise CircularDependencyError(f"Circular dependency detected for {interface}")
        self._resolving.add(interface)
        try:
            instance = self._create(reg)
        finally:
            self._resolving.discard(interface)

        if reg.lifetime == Lifetime.SINGLETON:
            self._singleton_instances[interface] = instance
        return instance

    def _create(self, reg: Registration) -> Any:
        if reg.factory is not None:
            return reg.factory(self)
        impl = reg.implementation or reg.interface
        return impl(**reg.kwargs)
