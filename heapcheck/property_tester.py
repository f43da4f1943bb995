#!/usr/bin/env python3
"""
Property-based testing of heap implementations.

Every heap property should hold for all inputs, so we search for inputs
where it does NOT hold. The negated predicate is handed to
hypothesis.find, which generates arguments, shrinks the first violation
it meets and returns it as the counterexample.
"""
import argparse
import importlib.util
import inspect
import sys
import time
import traceback
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from random import Random
from typing import Any, Dict, List, Optional, Sequence

from func_timeout import func_timeout, FunctionTimedOut
from hypothesis import find, settings, HealthCheck, strategies as st
from hypothesis.errors import NoSuchExample

from .generators import DEFAULT_MAX_HEAP_SIZE
from .heaps import HEAPS, BUGGY_HEAPS, HeapInterface, EmptyHeapError, get_heap
from .properties import HeapProperties, Property
from .property_stats import PropertyStats


@dataclass
class RunConfig:
    """Configuration for a property run"""
    max_examples: int = 200
    max_heap_size: int = DEFAULT_MAX_HEAP_SIZE
    timeout: int = 10
    seed: Optional[int] = None
    properties: Optional[List[str]] = None


@dataclass
class TestResult:
    """Result of testing a property against one heap."""
    prop_name: str
    heap: str
    status: str  # "passed", "counterexample", "timeout", "error"
    counterexample: Optional[Dict[str, Any]] = None
    message: Optional[str] = None
    time_ms: float = 0.0


class PropertyTester:
    def __init__(self, config: Optional[RunConfig] = None):
        self.config = config or RunConfig()
        self.results: List[TestResult] = []
        self.stats = PropertyStats()

    def _settings(self) -> settings:
        return settings(
            max_examples=self.config.max_examples,
            database=None,
            deadline=None,
            suppress_health_check=list(HealthCheck)
        )

    def _search(self, prop: Property):
        """Find a shrunk argument tuple violating the property."""
        def violates(args):
            try:
                return not prop(*args)
            except EmptyHeapError:
                # the heap ran empty while the property still expected elements
                return True

        random = Random(self.config.seed) if self.config.seed is not None else None
        return find(st.tuples(*prop.strategies), violates,
                    settings=self._settings(), random=random)

    def _verify_counterexample(self, prop: Property, args) -> bool:
        """Verify that the counterexample actually violates the property."""
        try:
            return prop(*args) == False
        except EmptyHeapError:
            return True
        except Exception:
            return False

    def test_property(self, prop: Property, heap_name: str) -> TestResult:
        """Test a single property by trying to find a counterexample."""
        start_time = time.time()
        try:
            args = func_timeout(self.config.timeout, self._search, args=(prop,))
        except NoSuchExample:
            result = TestResult(prop_name=prop.name, heap=heap_name, status="passed")
        except FunctionTimedOut:
            result = TestResult(
                prop_name=prop.name,
                heap=heap_name,
                status="timeout",
                message=f"No verdict within {self.config.timeout}s"
            )
        except Exception as e:
            traceback.print_exc()
            result = TestResult(
                prop_name=prop.name,
                heap=heap_name,
                status="error",
                message=str(e)
            )
        else:
            counterexample = dict(zip(prop.arg_names, args))
            if self._verify_counterexample(prop, args):
                result = TestResult(
                    prop_name=prop.name,
                    heap=heap_name,
                    status="counterexample",
                    counterexample=counterexample
                )
            else:
                result = TestResult(
                    prop_name=prop.name,
                    heap=heap_name,
                    status="error",
                    message=f"Found candidate {counterexample} but verification failed"
                )

        result.time_ms = (time.time() - start_time) * 1000
        self.results.append(result)
        self.stats.add(result.prop_name, result.heap, result.status,
                       time_ms=result.time_ms, counterexample=result.counterexample)
        return result

    def selected_properties(self, heap: HeapInterface) -> List[Property]:
        props = HeapProperties(heap, max_heap_size=self.config.max_heap_size)
        if self.config.properties is None:
            return props.properties()
        return [props.by_name(name) for name in self.config.properties]

    def test_heap(self, heap: HeapInterface) -> List[TestResult]:
        """Test all selected properties against one heap implementation."""
        results = []
        for prop in self.selected_properties(heap):
            print(f"\n{'='*60}")
            print(f"Testing {prop.name} on {heap.name}")
            print(f"{'='*60}")
            print(f"Property: {prop.description}")

            result = self.test_property(prop, heap.name)
            results.append(result)
            self._print_result(result)

        return results

    def test_heaps(self, heaps: Sequence[HeapInterface]) -> List[TestResult]:
        results = []
        for heap in heaps:
            results.extend(self.test_heap(heap))
        return results

    def _print_result(self, result: TestResult):
        """Print a single test result."""
        if result.status == "counterexample" and result.counterexample is not None:
            print(f"  ✗ COUNTEREXAMPLE FOUND ({result.time_ms:.0f}ms):")
            for param, value in result.counterexample.items():
                print(f"    {param} = {repr(value)}")
        elif result.status == "passed":
            print(f"  ✓ No counterexample found ({result.time_ms:.0f}ms)")
        elif result.status == "timeout":
            print(f"  ? Timeout: {result.message}")
        elif result.status == "error":
            print(f"  ! Error: {result.message}")

    def failing_heaps(self) -> List[str]:
        """Heaps with at least one result other than passed."""
        return [heap for heap in self.stats.get_heaps() if self.stats.failures(heap)]

    def results_summary(self) -> Dict[str, Any]:
        """Aggregate results per heap, in a JSON serializable form."""
        summary = {'by_heap': {}, 'results': []}
        for heap in self.stats.get_heaps():
            heap_results = [r for r in self.results if r.heap == heap]
            passed = sum(1 for r in heap_results if r.status == 'passed')
            summary['by_heap'][heap] = {
                'pass_rate': passed / len(heap_results),
                'avg_time': sum(r.time_ms for r in heap_results) / len(heap_results) / 1000,
                'total': len(heap_results),
                'failures': {r.prop_name: r.status for r in heap_results if r.status != 'passed'},
                'times': {r.prop_name: r.time_ms / 1000 for r in heap_results},
            }
        for r in self.results:
            counterexample = r.counterexample
            record = asdict(replace(r, counterexample=None))
            if counterexample is not None:
                record['counterexample'] = {k: repr(v) for k, v in counterexample.items()}
            summary['results'].append(record)
        return summary

    def print_summary(self):
        """Print summary of all test results."""
        print(f"\n{'='*60}")
        print("SUMMARY")
        print(f"{'='*60}")

        counterexamples = [r for r in self.results if r.status == "counterexample"]
        passed = [r for r in self.results if r.status == "passed"]
        timeouts = [r for r in self.results if r.status == "timeout"]
        errors = [r for r in self.results if r.status == "error"]

        total = len(self.results)
        print(f"Total properties tested: {total}")
        print(f"  ✗ Counterexamples found: {len(counterexamples)}")
        print(f"  ✓ No counterexample: {len(passed)}")
        print(f"  ? Timeouts: {len(timeouts)}")
        print(f"  ! Errors: {len(errors)}")

        if counterexamples:
            print(f"\nProperties with counterexamples:")
            for r in counterexamples:
                print(f"  - {r.heap}/{r.prop_name}: {r.counterexample}")

        print()
        print(self.stats.summary_table())


def load_heap_file(path: str) -> List[HeapInterface]:
    """Instantiate every HeapInterface subclass defined in a Python file."""
    path = Path(path)
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Cannot load heap file {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    heaps = []
    for _, cls in inspect.getmembers(module, inspect.isclass):
        if issubclass(cls, HeapInterface) and cls.__module__ == module.__name__:
            heaps.append(cls())
    if not heaps:
        raise ValueError(f"No HeapInterface subclass found in {path}")
    return heaps


def resolve_heaps(names: Sequence[str]) -> List[HeapInterface]:
    """Map CLI heap names to implementations; 'all' and 'buggy' expand to groups."""
    expanded = []
    for name in names:
        if name == 'all':
            expanded.extend(HEAPS)
        elif name == 'buggy':
            expanded.extend(BUGGY_HEAPS)
        else:
            expanded.append(name)
    return [get_heap(name) for name in dict.fromkeys(expanded)]


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Property-based testing of heap implementations")
    parser.add_argument('--heaps', nargs='+', default=None,
                        help='Heaps to test: registered names, "all" or "buggy" (default: binomial)')
    parser.add_argument('--heap-file', default=None,
                        help='Python file defining HeapInterface subclasses to test')
    parser.add_argument('--properties', nargs='+', choices=HeapProperties.NAMES, default=None,
                        help='Properties to check (default: all)')
    parser.add_argument('--max-examples', type=int, default=200,
                        help='Examples Hypothesis tries per property')
    parser.add_argument('--max-heap-size', type=positive_int, default=DEFAULT_MAX_HEAP_SIZE,
                        help='Upper bound on generated heap sizes')
    parser.add_argument('--timeout', type=int, default=10,
                        help='Seconds allowed per property')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for reproducible runs')
    parser.add_argument('--output-dir', default=None,
                        help='Write logs, history and analysis to this directory')
    parser.add_argument('--tag', default=None,
                        help='Label recorded with the run in the history')

    args = parser.parse_args(argv)

    config = RunConfig(
        max_examples=args.max_examples,
        max_heap_size=args.max_heap_size,
        timeout=args.timeout,
        seed=args.seed,
        properties=args.properties
    )

    names = args.heaps
    if names is None and args.heap_file is None:
        names = ['binomial']
    try:
        heaps = resolve_heaps(names or [])
    except ValueError as e:
        parser.error(str(e))
    if args.heap_file:
        heaps.extend(load_heap_file(args.heap_file))

    if args.output_dir:
        from .testing.driver import TestDriver
        driver = TestDriver(output_dir=args.output_dir, config=config)
        driver.run_suite(heaps, tag=args.tag)
        tester = driver.tester
    else:
        tester = PropertyTester(config)
        tester.test_heaps(heaps)
    tester.print_summary()

    unexpected = [heap for heap in tester.failing_heaps() if heap not in BUGGY_HEAPS]
    return 1 if unexpected else 0


if __name__ == "__main__":
    sys.exit(main())
