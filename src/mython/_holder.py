"""Holders referencing runtime objects."""

__all__ = ["Holder"]

import weakref

import mython


class Holder:
    """Nullable reference to a Mython runtime object.

    Holders come in two flavors. An owning holder keeps its object alive like
    any Python reference. An aliasing holder only keeps a weak reference, it
    is used for an instance's `self` binding so the instance does not keep
    itself alive through its own fields.

    Use the `own`, `share` and `none` constructors instead of calling the
    class directly.

    Args:
        data: (Object | weakref.ref | None) Referenced object or weak reference
        alias: (bool) Data is a weak reference
    """

    __slots__ = ("_data", "_alias")

    def __init__(self, data=None, alias=False):
        self._data = data
        self._alias = alias

    @classmethod
    def own(cls, obj):
        """Create a holder that keeps `obj` alive.

        Raises:
            TypeError: If obj is not a Mython object
        """
        if not isinstance(obj, mython.Object):
            raise TypeError(f"Holder.own called with non-object {obj!r}")
        return cls(obj)

    @classmethod
    def share(cls, obj):
        """Create an aliasing holder for an already live `obj`.

        Raises:
            TypeError: If obj is not a Mython object
        """
        if not isinstance(obj, mython.Object):
            raise TypeError(f"Holder.share called with non-object {obj!r}")
        return cls(weakref.ref(obj), alias=True)

    @classmethod
    def none(cls):
        """Create the empty holder, Mython's `None`."""
        return cls()

    @property
    def is_alias(self):
        """(bool) Holder does not own its object."""
        return self._alias

    def get(self):
        """Get the referenced object.

        Returns:
            (Object | None) Object, or None for an empty or expired holder
        """
        if self._alias:
            return self._data()
        return self._data

    def deref(self):
        """Get the referenced object, failing when there is none.

        Returns:
            (Object) Referenced object

        Raises:
            mython.EvalError: If the holder is empty or its alias has expired
        """
        obj = self.get()
        if obj is None:
            raise mython.EvalError("Dereferenced an empty holder")
        return obj

    def try_as(self, cls):
        """Get the object if it is an instance of `cls`, else None."""
        obj = self.get()
        return obj if isinstance(obj, cls) else None

    def __bool__(self):
        return self.get() is not None

    def __repr__(self):
        obj = self.get()
        if obj is None:
            return "Holder(None)"
        kind = "share" if self._alias else "own"
        return f"Holder.{kind}({obj!r})"
