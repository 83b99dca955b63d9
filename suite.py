import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


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
    """
    decorator to register a function as a test case.
    the wrapper keeps the function's name, so pytest can collect it as well.
    """

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


def assert_equal(actual: Any, expected: Any, message: str = "values differ") -> None:
    """assert_that for equality, with both values in the failure message."""
    if actual != expected:
        raise SuiteAssertionError(f"{message}: expected {expected!r}, got {actual!r}")


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any], message: str = "") -> BaseException:
    """calls func and requires it to raise error_type. returns the raised error for further checks."""
    try:
        func()
    except error_type as e:
        return e
    raise SuiteAssertionError(message or f"expected {error_type.__name__} to be raised")


def run_case(test_item: Dict[str, Any], verbose_errors: bool = False) -> Dict[str, Any]:
    """runs one registered test and returns its result record (passed, error, elapsed ms)."""
    passed = False
    error = None
    started = time.perf_counter()

    try:
        test_item['func']()
        passed = True
    except SuiteAssertionError as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
        if verbose_errors:
            traceback.print_exc()

    elapsed = (time.perf_counter() - started) * 1000
    return {'passed': passed, 'description': test_item['description'], 'error': error, 'elapsed': elapsed}


def run(title: str = "test run", verbose_errors: bool = False, slowest: int = 3) -> bool:
    """
    executes all registered tests, prints a report and returns whether every test passed.
    the `slowest` longest-running tests are listed after the summary.
    """
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        result = run_case(test_item, verbose_errors)
        _suite_state['results'].append(result)

        timing = f"{_c.grey}({result['elapsed']:.2f}ms){_c.reset}"
        if result['passed']:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {result['description']} {timing}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {result['description']} {timing}")
            print(f"    {_c.grey}└─> {result['error']}{_c.reset}")

    all_passed = _print_summary(start_time, slowest)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return all_passed


def _print_summary(start_time: float, slowest: int) -> bool:
    """prints the final summary of the test run."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    for result in sorted(results, key=lambda r: r['elapsed'], reverse=True)[:slowest]:
        print(f"  {_c.warn}slow:{_c.reset} {result['elapsed']:.2f}ms  {result['description']}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
