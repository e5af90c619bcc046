"""
a tiny test runner. test modules register cases with @test("description") and
finish with `suite.main(title)` so they can be run directly as scripts; the same
functions are plain test_* functions to pytest.

    python underbar_tests/underbar_arrays_test.py -v -k shuffle
"""
import sys
import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """raised by assert_that, to tell failed checks apart from crashes."""


# --- registration and assertions ---

def test(description: str) -> Callable:
    """registers the decorated function as a case under the given description."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        _suite_state['tests'].append({'func': wrapper, 'description': description})
        return wrapper

    return decorator


# pytest would otherwise collect the decorator itself in every module that imports it
test.__test__ = False


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: type, func: Callable, *args, **kwargs) -> BaseException:
    """runs func and checks that it raises error_type. returns the exception."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


# --- running ---

def _run_case(func: Callable, description: str, verbose_errors: bool = False) -> Dict[str, Any]:
    """runs one case and returns its result record (passed, error, elapsed ms)."""
    error = None
    started = time.perf_counter()
    try:
        func()
    except SuiteAssertionError as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
        if verbose_errors:
            traceback.print_exc()
    elapsed = (time.perf_counter() - started) * 1000
    return {'passed': error is None, 'description': description, 'error': error, 'ms': elapsed}


def _report(result: Dict[str, Any]) -> None:
    timing = f"{_c.grey}({result['ms']:.1f}ms){_c.reset}"
    if result['passed']:
        print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {result['description']} {timing}")
    else:
        print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {result['description']} {timing}")
        print(f"    {_c.grey}└─> {result['error']}{_c.reset}")


def run(title: str = "test run", verbose_errors: bool = False, only: Optional[str] = None) -> int:
    """
    runs the registered cases (those whose description contains `only`, when given),
    prints a report and returns the number of failures. the registry is emptied
    afterwards so one script can hold several separate runs.
    """
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    selected = [t for t in _suite_state['tests'] if only is None or only in t['description']]
    _suite_state['results'] = []
    for case in selected:
        result = _run_case(case['func'], case['description'], verbose_errors)
        _suite_state['results'].append(result)
        _report(result)

    skipped = len(_suite_state['tests']) - len(selected)
    _suite_state['tests'] = []
    return _print_summary(start_time, skipped)


def main(title: str, argv: Optional[List[str]] = None) -> None:
    """run() with `-v` (print tracebacks) and `-k text` (filter by description), then exit."""
    argv = sys.argv[1:] if argv is None else argv
    only = argv[argv.index('-k') + 1] if '-k' in argv[:-1] else None
    sys.exit(1 if run(title, verbose_errors='-v' in argv, only=only) else 0)


def _print_summary(start_time: float, skipped: int = 0) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    failed = [r for r in results if not r['passed']]
    slowest = max(results, key=lambda r: r['ms'], default=None)
    summary_color = _c.fail if failed else _c.ok

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{len(results)}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(results) - len(failed)}{_c.reset}, {_c.fail}failed: {len(failed)}{_c.reset}"
          + (f", skipped: {skipped}" if skipped else ""))
    if slowest is not None:
        print(f"  {_c.grey}slowest: {slowest['description']} ({slowest['ms']:.1f}ms){_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return len(failed)
