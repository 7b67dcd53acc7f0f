from collections.abc import Generator, Iterator
from contextlib import contextmanager
from functools import wraps
from inspect import isgeneratorfunction
import types
from typing import TYPE_CHECKING, Any, Callable, Optional, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.generator_wrapper import GeneratorWrapper
from src.platform.logging.loguru_io_config import (
    ExtraField,
    GeneratorMethod,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    handle_yield,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    """
    Decorator that logs arguments and return values of a call at DEBUG level.

    Exceptions are logged once (the first decorated frame that sees them) and re-raised
    unless reraise=False, in which case the call returns None.
    Generator functions return a GeneratorWrapper so each resume is logged as well.
    """

    depth = 2  # log method frame + wrapper frame

    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}

    def _bound(self, extra_depth: int = 0) -> 'LoguruLogger':
        return self._custom_logger.bind(**self.extra).opt(depth=self.depth + extra_depth)

    def log_args_kwargs_content(
        self, *args: Any, yield_method: Optional[GeneratorMethod] = None, **kwargs: Any
    ) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if not settings.DEBUG:
            return
        self._bound().debug(
            f'{handle_yield(yield_method)}args: {self.mask_sensitive(args)}, '
            f'kwargs: {self.mask_sensitive(kwargs)}'
        )

    def log_return_content(
        self, return_value: Any, yield_method: Optional[GeneratorMethod] = None
    ) -> None:
        if settings.DEBUG:
            self._bound().debug(
                f'{handle_yield(yield_method)}return: {self.mask_sensitive(return_value)}'
            )

    def log_exception(self, e: Exception) -> None:
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            # Expected failures: message only, no traceback
            self._bound(2).error(f'{type(e).__name__}: {e}')
        else:
            self._bound(2).exception(f'{type(e).__name__}: {e}')

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            processed: Any = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            processed = type(data)(self.mask_sensitive(item) for item in data)
        else:
            processed = mask_sensitive(data)
        return truncate_content(processed) if self.truncate_content else processed

    @contextmanager
    def _guarded(self) -> Iterator[None]:
        try:
            yield
        except Exception as e:
            self.log_exception(e)
            if self.reraise:
                raise
        finally:
            reset_call_depth()

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        loguru_file = cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        func.__code__ = func.__code__.replace(co_filename=loguru_file)  # type: ignore[attr-defined]
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if isgeneratorfunction(func):

            @wraps(func)
            def generator_wrapper(*args: Any, **kwargs: Any) -> GeneratorWrapper | None:
                with self._guarded():
                    self.log_args_kwargs_content(*args, **kwargs)
                    gen_obj = cast(Generator[Any, Any, Any], func(*args, **kwargs))
                    self.log_return_content(gen_obj)
                    return GeneratorWrapper(gen_obj, self)
                return None

            return cast(_F, self._hide_from_traceback(generator_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with self._guarded():
                self.log_args_kwargs_content(*args, **kwargs)
                call_args, call_kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*call_args, **call_kwargs)
                self.log_return_content(return_value)
                return return_value
            return None

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return decorator(func) if func else decorator
