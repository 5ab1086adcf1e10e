"""
Member Handles.

A :class:`MemberHandle` is the binding a resolved property keeps in order to
read, write or call the underlying class member later on.

Python has no access modifiers, so encapsulation is modelled on the handle
itself: a handle to a non-public member (``_name``, ``__name`` or any member of
a class whose name starts with an underscore) starts *locked* and refuses to
be invoked until :meth:`MemberHandle.unlock` has been called. Resolution
unlocks every non-public member it accepts, gated by the configured access
level, so that invoking a resolved property never fails on first use.
"""

import inspect
import threading
from typing import Any


class MemberAccessError(RuntimeError):
  """
  Raised when a member cannot be made accessible, or is invoked while locked.

  This is an environment fault, not a recoverable condition. A property that
  resolves but cannot be invoked would corrupt later mapping behavior.
  """


class MemberHandle:
  """
  Reflective binding to one attribute of a class.

  Attributes:
      owner (type): The class the member is declared on.
      attr_name (str): The storage name (name-mangled for private members).
      callable_member (bool): True for plain methods, which are invoked rather
          than read or assigned.
  """

  def __init__(self, owner: type, attr_name: str, public: bool, callable_member: bool = False):
    self.owner = owner
    self.attr_name = attr_name
    self.callable_member = callable_member
    self._accessible = public
    self._lock = threading.Lock()

  @property
  def accessible(self) -> bool:
    """Whether the handle may be invoked."""
    return self._accessible

  def unlock(self) -> None:
    """
    Marks the member as accessible for invocation.

    Idempotent and safe to call from several threads for the same handle.

    Raises:
        MemberAccessError: If the member is no longer declared on its owner.
    """
    if self._accessible:
      return
    with self._lock:
      if self._accessible:
        return
      if not self._is_declared():
        raise MemberAccessError(f"Cannot unlock '{self.attr_name}': not declared on {self.owner.__qualname__}")
      self._accessible = True

  def get(self, target: Any) -> Any:
    self._ensure_accessible()
    return getattr(target, self.attr_name)

  def set(self, target: Any, value: Any) -> None:
    self._ensure_accessible()
    setattr(target, self.attr_name, value)

  def call(self, target: Any, *args: Any) -> Any:
    self._ensure_accessible()
    return getattr(target, self.attr_name)(*args)

  def _ensure_accessible(self) -> None:
    if not self._accessible:
      raise MemberAccessError(f"Member '{self.owner.__qualname__}.{self.attr_name}' is locked; resolve it first")

  def _is_declared(self) -> bool:
    if self.attr_name in vars(self.owner):
      return True
    try:
      annotations = inspect.get_annotations(self.owner)
    except NameError:
      annotations = vars(self.owner).get("__annotations__", {})
    return self.attr_name in annotations

  def __repr__(self) -> str:
    state = "unlocked" if self._accessible else "locked"
    return f"MemberHandle({self.owner.__qualname__}.{self.attr_name}, {state})"
