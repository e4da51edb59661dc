"""
Reusable validation helpers and decorators.
"""
# 说明：参数验证相关的辅助函数与装饰器，用于在库内部统一进行轻量级参数检查与转换。
# 职责：
# - ParamValidationError：专门用于参数校验失败的异常类型
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_type：检查参数是否属于指定类型集合，并在失败时给出带 label 的错误提示
# - as_real：将数值参数规范化为 float，拒绝布尔与非数值类型
# - validate_arguments：根据 schema 为函数参数应用验证/转换逻辑的装饰器，统一处理位置参数与关键字参数

from __future__ import annotations

import functools
import numbers
from typing import Any, Callable, Dict, Mapping, Tuple, Type


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的 ParamValidationError
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}")


def as_real(value: Any, *, label: str = "value") -> float:
    """Return ``value`` as a float, rejecting booleans and non-real inputs."""
    if isinstance(value, bool):
        raise ParamValidationError(f"{label} must be a real number, got bool")
    ensure_type(value, (numbers.Real,), label=label)
    return float(value)


def validate_arguments(schema: Mapping[str, Callable[[Any], Any]]) -> Callable:
    """
    Decorator validating arguments according to callables.

    Each validator receives the argument and should return the (possibly
    transformed) value or raise ParamValidationError.
    """
    # schema：以参数名为键、验证/转换函数为值的映射，用于在调用前统一处理入参

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            mutable = list(args)
            kw: Dict[str, Any] = dict(kwargs)
            for name, validator in schema.items():
                if name in kw:
                    kw[name] = validator(kw[name])
                    continue
                if name not in func.__code__.co_varnames:
                    continue
                index = func.__code__.co_varnames.index(name)
                # 未显式提供的位置参数（使用默认值）不强制验证
                if index >= len(mutable):
                    continue
                mutable[index] = validator(mutable[index])
            return func(*tuple(mutable), **kw)

        return wrapper

    return decorator
