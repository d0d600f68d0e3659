# -*- coding: utf-8 -*-
"""
Tunable Parameter Annotations - Declarative parameter constraints via typing.Annotated.

Provides constraint marker types (``Range``, ``Options``, ``Desc``) for use
inside ``typing.Annotated`` annotations on ``ImageProcessor`` subclasses, plus
the ``ParamSpec`` introspection class and the collection and
``__init__``-generation utilities consumed by
``ImageProcessor.__init_subclass__``.

Usage
-----
Declare tunable parameters as class-body annotations::

    from typing import Annotated
    from pixelkit.image_processing.params import Range, Options, Desc

    class MyMorphology(ImageTransform):
        iterations: Annotated[int, Range(min=0, max=64), Desc('Passes')] = 1
        structure: Annotated[str, Options('cross', 'square'), Desc('Shape')] = 'cross'

Parameters are collected into ``cls.__param_specs__`` at class definition
time. An ``__init__`` is generated unless the class defines its own.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import inspect
from typing import (
    Annotated,
    Any,
    Optional,
    Tuple,
    Union,
    get_origin,
    get_type_hints,
)

# pixelkit internal
from pixelkit.exceptions import ValidationError

Number = Union[int, float]


class ParamMeta:
    """Base marker for tunable parameter metadata in ``Annotated`` types."""


class Range(ParamMeta):
    """Inclusive numeric range constraint."""

    __slots__ = ('min', 'max')

    def __init__(self, min: Optional[Number] = None,
                 max: Optional[Number] = None) -> None:
        self.min = min
        self.max = max

    def __repr__(self) -> str:
        bounds = []
        if self.min is not None:
            bounds.append(f"min={self.min!r}")
        if self.max is not None:
            bounds.append(f"max={self.max!r}")
        return f"Range({', '.join(bounds)})"


class Options(ParamMeta):
    """Discrete choice constraint. At least one choice is required."""

    __slots__ = ('choices',)

    def __init__(self, *choices: Any) -> None:
        if not choices:
            raise ValueError("Options requires at least one choice")
        self.choices = choices

    def __repr__(self) -> str:
        return f"Options{self.choices!r}"


class Desc(ParamMeta):
    """Human-readable parameter description."""

    __slots__ = ('text',)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"Desc({self.text!r})"


_MISSING = object()


class ParamSpec:
    """Resolved specification for a single tunable parameter.

    Attributes
    ----------
    name : str
        Keyword-argument name.
    param_type : type
        Expected Python type. ``int`` values are accepted for ``float``.
    default : Any
        Default value, or ``None`` when the parameter is required.
    description : str
        Text from the ``Desc`` marker.
    min_value, max_value : int, float, or None
        Inclusive bounds from ``Range``.
    choices : tuple or None
        Allowed values from ``Options``.
    """

    __slots__ = (
        'name', 'param_type', 'default', 'has_default',
        'description', 'min_value', 'max_value', 'choices',
    )

    def __init__(
        self,
        name: str,
        param_type: type,
        default: Any = _MISSING,
        description: str = '',
        min_value: Optional[Number] = None,
        max_value: Optional[Number] = None,
        choices: Optional[Tuple] = None,
    ) -> None:
        self.name = name
        self.param_type = param_type
        self.has_default = default is not _MISSING
        self.default = default if self.has_default else None
        self.description = description
        self.min_value = min_value
        self.max_value = max_value
        self.choices = choices

    @property
    def required(self) -> bool:
        return not self.has_default

    def validate(self, value: Any) -> None:
        """Check *value* against the declared type and constraints.

        Raises
        ------
        TypeError
            If *value* has the wrong type.
        ValidationError
            If *value* is outside the range or not an allowed choice.
        """
        if self.param_type is not object:
            expected = (int, float) if self.param_type is float else self.param_type
            is_stray_bool = isinstance(value, bool) and self.param_type is not bool
            if is_stray_bool or not isinstance(value, expected):
                raise TypeError(
                    f"Parameter '{self.name}' must be "
                    f"{self.param_type.__name__}, got {type(value).__name__}"
                )
        if self.min_value is not None and value < self.min_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is below minimum {self.min_value!r}"
            )
        if self.max_value is not None and value > self.max_value:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is above maximum {self.max_value!r}"
            )
        if self.choices is not None and value not in self.choices:
            raise ValidationError(
                f"Parameter '{self.name}' value {value!r} "
                f"is not in allowed choices {self.choices!r}"
            )

    def __repr__(self) -> str:
        text = f"ParamSpec(name={self.name!r}, param_type={self.param_type.__name__}"
        if self.has_default:
            text += f", default={self.default!r}"
        if self.choices is not None:
            text += f", choices={self.choices!r}"
        return text + ")"


def collect_param_specs(cls: type) -> Tuple[ParamSpec, ...]:
    """Parse ``Annotated`` hints on *cls* into ``ParamSpec`` objects.

    Only fields carrying at least one ``ParamMeta`` marker are collected,
    ordered parent-first through the MRO.

    Raises
    ------
    TypeError
        If a field declares both ``Range`` and ``Options``.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        return ()

    ordered = []
    for klass in reversed(cls.__mro__):
        for name in getattr(klass, '__annotations__', {}):
            if name in hints and name not in ordered:
                ordered.append(name)

    specs = []
    for name in ordered:
        hint = hints[name]
        if get_origin(hint) is not Annotated:
            continue
        markers = [m for m in hint.__metadata__ if isinstance(m, ParamMeta)]
        if not markers:
            continue

        bounds = next((m for m in markers if isinstance(m, Range)), None)
        options = next((m for m in markers if isinstance(m, Options)), None)
        desc = next((m for m in markers if isinstance(m, Desc)), None)
        if bounds and options:
            raise TypeError(
                f"Parameter '{name}' on {cls.__qualname__}: "
                f"Range and Options are mutually exclusive."
            )

        specs.append(ParamSpec(
            name=name,
            param_type=hint.__args__[0],
            default=getattr(cls, name, _MISSING),
            description=desc.text if desc else '',
            min_value=bounds.min if bounds else None,
            max_value=bounds.max if bounds else None,
            choices=options.choices if options else None,
        ))
    return tuple(specs)


def _make_init(param_specs: Tuple[ParamSpec, ...]):
    """Build a keyword-only ``__init__`` that validates and stores params."""

    def __init__(self, **kwargs):
        unexpected = set(kwargs) - {s.name for s in param_specs}
        if unexpected:
            raise TypeError(
                f"{type(self).__name__}() got unexpected "
                f"keyword arguments: {', '.join(sorted(unexpected))}"
            )
        for spec in param_specs:
            if spec.name in kwargs:
                value = kwargs[spec.name]
            elif spec.has_default:
                value = spec.default
            else:
                raise TypeError(
                    f"{type(self).__name__}() missing required "
                    f"keyword argument: '{spec.name}'"
                )
            spec.validate(value)
            setattr(self, spec.name, value)

    params = [inspect.Parameter('self', inspect.Parameter.POSITIONAL_OR_KEYWORD)]
    for spec in param_specs:
        params.append(inspect.Parameter(
            spec.name,
            inspect.Parameter.KEYWORD_ONLY,
            default=spec.default if spec.has_default else inspect.Parameter.empty,
        ))
    __init__.__signature__ = inspect.Signature(params)
    __init__.__qualname__ = '__init__'
    return __init__
