import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '[ok]'
FAIL_MARK = '[!!]'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class SuiteAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case. the function stays a plain test_* for pytest."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: type, func: Callable, *args, **kwargs) -> BaseException:
    """assert that calling func raises error_type and hand back the raised error for inspection."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)}")


def run(title: str = "test run") -> int:
    """executes all registered tests, prints a report and returns the number of failures."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}{PASS_MARK}{_c.reset}  {description}")
        else:
            print(f"  {_c.fail}{FAIL_MARK}{_c.reset}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    failed_count = _print_summary(start_time)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return failed_count


def main(title: str) -> None:
    """run the registered tests and exit non-zero when any of them failed."""
    sys.exit(1 if run(title=title) else 0)


def _print_summary(start_time: float) -> int:
    """prints the final summary of the test run and returns the failure count."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count
