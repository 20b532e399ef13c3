"""Runtime objects: values, classes and instances.

Every runtime value derives from `Object` and knows how to print itself.
`Number`, `String` and `Bool` are immutable wrappers around Python values.
A `Class` is a named list of methods with an optional parent class, method
lookup walks up that chain. A `ClassInstance` stores its fields in a
closure dict where "self" is always bound to an aliasing holder of the
instance.
"""

__all__ = [
    "Object",
    "Statement",
    "Number",
    "String",
    "Bool",
    "Method",
    "Class",
    "ClassInstance",
    "is_true",
]

import logging

import mython


logger = logging.getLogger(__name__)


class Statement:
    """Executable code, such as a method body.

    Subclasses implement `execute`, which runs with a closure of local names
    and the shared context, and returns a holder with the result.
    """

    __slots__ = ()

    def execute(self, closure, context):
        """Run the statement.

        Args:
            closure: (dict[str, Holder]) Local names visible to the statement
            context: (Context) Execution context

        Returns:
            (Holder) Result of execution
        """
        raise NotImplementedError(f"{self.__class__.__name__}.execute() not implemented")


class Object:
    """Base class for all Mython runtime values."""

    __slots__ = ("__weakref__",)

    def print(self, output, context):
        """Write the printed form of this object to `output`."""
        raise NotImplementedError(f"{self.__class__.__name__}.print() not implemented")


class _ValueObject(Object):
    """Immutable wrapper around a plain Python value."""

    __slots__ = ("_value",)
    _python_type = object

    def __init__(self, value):
        # Exact type, so a Python bool is never taken as a Number
        if type(value) is not self._python_type:
            raise TypeError(
                f"{self.__class__.__name__} requires {self._python_type.__name__}, "
                f"got {type(value).__name__}"
            )
        self._value = value

    @property
    def value(self):
        """Wrapped Python value."""
        return self._value

    def print(self, output, context):
        output.write(str(self._value))

    def __repr__(self):
        return f"{self.__class__.__name__}({self._value!r})"


class Number(_ValueObject):
    """Integer value."""

    __slots__ = ()
    _python_type = int


class String(_ValueObject):
    """Text value."""

    __slots__ = ()
    _python_type = str


class Bool(_ValueObject):
    """Boolean value, printed as `True` or `False`."""

    __slots__ = ()
    _python_type = bool

    def print(self, output, context):
        output.write("True" if self._value else "False")


class Method:
    """A method declared in a class body.

    Args:
        name: (str) Method name
        formal_params: (Iterable[str]) Parameter names, not counting `self`
        body: (Statement) Code run when the method is called

    Attributes:
        name: (str) Method name
        formal_params: (tuple[str]) Parameter names in declaration order
        body: (Statement) Method body
    """

    __slots__ = ("name", "formal_params", "body")

    def __init__(self, name, formal_params, body):
        self.name = name
        self.formal_params = tuple(formal_params)
        self.body = body

    @property
    def arity(self):
        """(int) Number of arguments the method must be called with."""
        return len(self.formal_params)

    def __repr__(self):
        return f"Method<{self.name}({', '.join(self.formal_params)})>"


class Class(Object):
    """A user defined class.

    Classes are immutable once created. Methods are looked up by name in the
    class first and then through the parent chain.

    Args:
        name: (str) Class name
        methods: (Iterable[Method]) Methods declared directly on this class
        parent: (Class | None) Parent class

    Raises:
        TypeError: If parent is not a Class
        mython.EvalError: If two methods share a name
    """

    __slots__ = ("_name", "_methods", "_parent")

    def __init__(self, name, methods=(), parent=None):
        if parent is not None and not isinstance(parent, Class):
            raise TypeError(f"Class parent must be a Class, got {parent!r}")
        self._name = name
        self._parent = parent
        self._methods = {}
        for method in methods:
            if method.name in self._methods:
                raise mython.EvalError(
                    f"Class {name} defines method {method.name} more than once"
                )
            self._methods[method.name] = method
        logger.debug("Defined class %s with %d methods", name, len(self._methods))

    @property
    def name(self):
        """(str) Class name."""
        return self._name

    @property
    def parent(self):
        """(Class | None) Parent class."""
        return self._parent

    @property
    def methods(self):
        """(tuple[Method]) Methods declared on this class, in order."""
        return tuple(self._methods.values())

    def get_method(self, name):
        """Find a method on this class or its ancestors.

        Args:
            name: (str) Method name

        Returns:
            (Method | None) Closest method with that name, if any
        """
        method = self._methods.get(name)
        if method is None and self._parent is not None:
            return self._parent.get_method(name)
        return method

    def print(self, output, context):
        output.write(f"Class {self._name}")

    def __repr__(self):
        return f"Class<{self._name}>"


class ClassInstance(Object):
    """An instance of a user class.

    Args:
        cls: (Class) Class being instantiated

    Attributes:
        fields: (dict[str, Holder]) Instance fields, always including "self"
    """

    __slots__ = ("_cls", "fields")

    def __init__(self, cls):
        self._cls = cls
        self.fields = {"self": mython.Holder.share(self)}

    @property
    def cls(self):
        """(Class) Class of this instance."""
        return self._cls

    def has_method(self, name, argument_count):
        """Check for a method accepting exactly `argument_count` arguments."""
        method = self._cls.get_method(name)
        return method is not None and method.arity == argument_count

    def call(self, name, args, context):
        """Call a method on this instance.

        The method body runs in a new closure holding `self` and the
        parameters bound positionally to `args`.

        Args:
            name: (str) Method name
            args: (Sequence[Holder]) Argument values
            context: (Context) Execution context

        Returns:
            (Holder) Value returned by the method body

        Raises:
            mython.EvalError: If no method matches the name and argument count
        """
        if not self.has_method(name, len(args)):
            raise mython.EvalError(
                f"No such method {self._cls.name}.{name} taking {len(args)} arguments"
            )
        method = self._cls.get_method(name)
        logger.debug("Calling %s.%s", self._cls.name, name)

        closure = {"self": mython.Holder.share(self)}
        closure.update(zip(method.formal_params, args))
        return method.body.execute(closure, context)

    def print(self, output, context):
        if self.has_method("__str__", 0):
            self.call("__str__", [], context).deref().print(output, context)
        else:
            output.write(f"<{self._cls.name} object at {id(self):#x}>")

    def __repr__(self):
        return f"ClassInstance<{self._cls.name}>"


def is_true(holder):
    """Truthiness of a holder.

    Bools are their own value, numbers are true when nonzero and strings
    when non-empty. Anything else, including an empty holder, is false.

    Args:
        holder: (Holder) Value to test

    Returns:
        (bool) Truth value
    """
    obj = holder.get()
    if isinstance(obj, (Bool, Number, String)):
        return bool(obj.value)
    return False
