"""
Analysis utilities for property runs.
Provides visualization and insight generation from heap test results.
"""

from typing import Dict, List, Any
import numpy as np
from collections import defaultdict
import matplotlib.pyplot as plt
from pathlib import Path
import json

class ResultAnalyzer:
    def __init__(self, results: Dict[str, Any]):
        self.results = results
        self.heap_data = defaultdict(lambda: {
            'pass_rates': [],
            'times': [],
            'failures': defaultdict(int)
        })
        self._process_results()

    def _process_results(self):
        """Process PropertyTester.results_summary() output into analyzable data"""
        for heap, stats in self.results.get('by_heap', {}).items():
            self.heap_data[heap]['pass_rates'].append(float(stats.get('pass_rate', 0)))
            self.heap_data[heap]['times'].extend(
                float(t) for t in stats.get('times', {}).values()
            )
            for prop_name in stats.get('failures', {}):
                self.heap_data[heap]['failures'][prop_name] += 1

    def analyze_heap_performance(self) -> Dict[str, Any]:
        """Analyze per-heap pass rates and timings"""
        analysis = {}

        for heap, data in self.heap_data.items():
            times = data['times'] or [0.0]
            analysis[heap] = {
                'pass_rate': float(np.mean(data['pass_rates'])),
                'avg_time': float(np.mean(times)),
                'max_time': float(np.max(times)),
                'time_stability': float(1.0 / (1.0 + np.std(times))),  # Higher is more stable
                'failed_properties': sorted(data['failures'])
            }

        return analysis

    def generate_plots(self, output_dir: str = 'analysis'):
        """Generate analysis plots"""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        self._plot_pass_rates(output_dir / 'pass_rates.png')
        self._plot_timing_distribution(output_dir / 'timing_dist.png')
        self._plot_failure_distribution(output_dir / 'failure_dist.png')

    def _plot_pass_rates(self, output_path: Path):
        """Plot pass rates by heap"""
        heaps = list(self.heap_data.keys())
        pass_rates = [np.mean(self.heap_data[h]['pass_rates']) for h in heaps]

        plt.figure(figsize=(10, 6))
        plt.bar(heaps, pass_rates)
        plt.title('Property Pass Rates by Heap')
        plt.ylabel('Pass Rate')
        plt.ylim(0, 1.1)
        plt.xticks(rotation=30, ha='right')

        for i, v in enumerate(pass_rates):
            plt.text(i, v + 0.01, f'{v:.0%}', ha='center')

        plt.tight_layout()
        plt.savefig(output_path)
        plt.close()

    def _plot_timing_distribution(self, output_path: Path):
        """Plot per-property timing distribution by heap"""
        plt.figure(figsize=(12, 6))

        times = []
        labels = []
        for heap, data in self.heap_data.items():
            if data['times']:  # Only plot if we have timing data
                times.append(data['times'])
                labels.append(heap)

        if times:
            plt.boxplot(times)
            plt.xticks(range(1, len(labels) + 1), labels, rotation=30, ha='right')
            plt.title('Property Check Time by Heap')
            plt.ylabel('Time (seconds)')
            plt.tight_layout()
            plt.savefig(output_path)
        plt.close()

    def _plot_failure_distribution(self, output_path: Path):
        """Plot which properties failed for which heap"""
        heaps = list(self.heap_data.keys())
        prop_names = sorted({p for data in self.heap_data.values() for p in data['failures']})

        plt.figure(figsize=(15, 8))

        if prop_names:  # Only create plot if we have failures to show
            data = np.array([[self.heap_data[h]['failures'].get(p, 0) for p in prop_names]
                             for h in heaps])

            bottom = np.zeros(len(heaps))
            for i, prop_name in enumerate(prop_names):
                plt.bar(heaps, data[:, i], bottom=bottom, label=prop_name)
                bottom += data[:, i]

            plt.title('Failing Properties by Heap')
            plt.ylabel('Number of Failing Properties')
            plt.legend(bbox_to_anchor=(1.05, 1), loc='upper left')
            plt.tight_layout()
            plt.savefig(output_path)
        plt.close()

    def generate_insights(self) -> List[str]:
        """Generate insights from the analysis"""
        insights = []
        performance = self.analyze_heap_performance()

        if not performance:
            return ["No heap results available for analysis"]

        fastest = min(performance.items(), key=lambda x: x[1]['avg_time'])[0]
        insights.append(f"Fastest heap to check: {fastest} "
                        f"({performance[fastest]['avg_time']:.2f}s per property)")

        correct = [h for h, p in performance.items() if p['pass_rate'] == 1.0]
        if correct:
            insights.append(f"Heaps passing every property: {', '.join(correct)}")

        for heap, data in performance.items():
            if data['failed_properties']:
                insights.append(f"{heap}: violates {', '.join(data['failed_properties'])}")

        # Properties no heap violated cannot tell heaps apart
        all_props = {p for data in self.heap_data.values() for p in data['failures']}
        if len(performance) > 1 and not all_props:
            insights.append("No property distinguished between the tested heaps")

        return insights

    def save_analysis(self, output_dir: str = 'analysis'):
        """Save complete analysis to files"""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        self.generate_plots(output_dir)

        performance = self.analyze_heap_performance()
        with open(output_dir / 'performance.json', 'w') as f:
            json.dump(performance, f, indent=2)

        insights = self.generate_insights()
        with open(output_dir / 'insights.md', 'w') as f:
            f.write("# Analysis Insights\n\n")
            for insight in insights:
                f.write(f"- {insight}\n")

    def generate_report(self) -> str:
        """Generate a complete analysis report"""
        report = ["# Heap Property Report\n"]

        total_checks = sum(stats.get('total', 0) for stats in self.results.get('by_heap', {}).values())
        total_failures = sum(len(stats.get('failures', {}))
                             for stats in self.results.get('by_heap', {}).values())

        report.append("## Overall Statistics\n")
        if total_checks > 0:
            report.append(f"- Property checks: {total_checks}")
            report.append(f"- Failing checks: {total_failures}")
            report.append(f"- Overall pass rate: {(total_checks - total_failures)/total_checks:.2%}\n")

        report.append("## Heaps\n")
        performance = self.analyze_heap_performance()
        for heap, stats in performance.items():
            report.append(f"### {heap}")
            report.append(f"- Pass rate: {stats['pass_rate']:.2%}")
            report.append(f"- Average time: {stats['avg_time']:.2f}s")
            report.append(f"- Slowest property: {stats['max_time']:.2f}s")

            failures = self.results['by_heap'][heap].get('failures', {})
            if failures:
                report.append("\nFailing properties:")
                for prop_name, status in failures.items():
                    report.append(f"- {prop_name}: {status}")
            report.append("")

        report.append("## Key Insights\n")
        for insight in self.generate_insights():
            report.append(f"- {insight}")

        return "\n".join(report)
