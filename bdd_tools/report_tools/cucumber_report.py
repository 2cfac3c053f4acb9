"""
================================================================================
Cucumber-style HTML Report
================================================================================

Post-run transformation of scenario results into a static HTML report.

Features:
- Reads the line-delimited run log written by the scenario hooks
- Also accepts Cucumber JSON (pytest-bdd --cucumberjson)
- Pass/fail summary and run classifications (project, author, browser, ...)
- Embedded scenario screenshots
- Timestamped output directory per generation

Reporting never modifies its inputs: a failure here is logged and raised,
and the recorded scenario results stay as they are.

================================================================================
"""

import base64
import json
import os
import platform
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from jinja2 import BaseLoader, Environment, TemplateError, select_autoescape
from loguru import logger

from bddsuites.ui_testing.framework.browser_manager import ENVIRONMENT_OVERRIDE_VAR
from bddsuites.ui_testing.framework.config_loader import Config
from bddsuites.ui_testing.framework.exceptions import ReportGenerationError
from bddsuites.ui_testing.framework.hooks import ScenarioResult


# ================================================================================
# HTML Template
# ================================================================================

_HTML_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ classifications["Project"] }} | Execution Report</title>
<meta name="viewport" content="width=device-width,initial-scale=1"/>
<style>
  :root { --bg:#f7fafc; --fg:#111; --muted:#666; --card:#fff; --ok:#1a7f37; --bad:#d00000; --warn:#f59e0b; }
  * { box-sizing: border-box; }
  body { font-family: 'Segoe UI', Roboto, sans-serif; background: var(--bg); color: var(--fg); margin: 0; padding: 20px; }
  .wrap { max-width: 1100px; margin: 0 auto; }
  .card { background: var(--card); border-radius: 12px; box-shadow: 0 4px 12px rgba(0,0,0,0.08); padding: 20px; margin-bottom: 16px; }
  .grid { display: grid; grid-template-columns: 1fr 1fr; gap: 16px; }
  h1,h2,h3 { margin: 0 0 12px 0; }
  .muted { color: var(--muted); font-size: 13px; }
  .badge { display: inline-block; padding: 4px 12px; border-radius: 6px; font-size: 12px; font-weight: 600; text-transform: uppercase; color: #fff; }
  .badge.passed { background: var(--ok); }
  .badge.failed { background: var(--bad); }
  .badge.skipped { background: var(--warn); }
  .kv { display: grid; grid-template-columns: 160px 1fr; gap: 8px; font-size: 14px; }
  table { width: 100%; border-collapse: collapse; font-size: 14px; }
  th, td { padding: 10px; border-bottom: 1px solid #eee; text-align: left; vertical-align: top; }
  th { background: #eef4ff; font-weight: 600; }
  pre { background: #f0f3f7; padding: 12px; border-radius: 8px; overflow: auto; font-size: 12px; white-space: pre-wrap; }
  details img { max-width: 100%; border-radius: 8px; margin-top: 10px; }
  footer { margin-top: 30px; text-align: center; color: var(--muted); font-size: 12px; }
</style>
</head>
<body>
<div class="wrap">
  <h1>{{ classifications["Project"] }}</h1>
  <div class="muted">Generated {{ generated_at }} from {{ sources | join(", ") }}</div>

  <div class="grid" style="margin-top:16px;">
    <div class="card">
      <h2>Summary</h2>
      <div class="kv">
        <div>Scenarios:</div><div>{{ summary.total }}</div>
        <div>Passed:</div><div><span class="badge passed">{{ summary.passed }}</span></div>
        <div>Failed:</div><div><span class="badge failed">{{ summary.failed }}</span></div>
        <div>Skipped:</div><div><span class="badge skipped">{{ summary.skipped }}</span></div>
        <div>Pass rate:</div><div>{{ "%.2f" | format(summary.pass_rate) }}%</div>
        <div>Duration:</div><div>{{ "%.2f" | format(summary.duration) }}s</div>
      </div>
    </div>
    <div class="card">
      <h2>Classifications</h2>
      <div class="kv">
        {% for key, value in classifications.items() %}
        <div>{{ key }}:</div><div>{{ value }}</div>
        {% endfor %}
      </div>
    </div>
  </div>

  <div class="card">
    <h2>Scenarios</h2>
    <table>
      <thead><tr><th>Feature</th><th>Scenario</th><th>Status</th><th>Duration</th><th>Details</th></tr></thead>
      <tbody>
        {% for row in scenarios %}
        <tr>
          <td>{{ row.feature or "-" }}</td>
          <td>{{ row.name }}</td>
          <td><span class="badge {{ row.status }}">{{ row.status }}</span></td>
          <td>{{ "%.2f" | format(row.duration) }}s</td>
          <td>
            {% if row.error %}<pre>{{ row.error }}</pre>{% endif %}
            {% if row.screenshot %}
            <details><summary>Screenshot</summary>
              <img alt="{{ row.name }}" src="data:image/png;base64,{{ row.screenshot }}"/>
            </details>
            {% endif %}
          </td>
        </tr>
        {% endfor %}
      </tbody>
    </table>
  </div>

  <footer>{{ classifications["Author"] }} • {{ classifications["Execution Time"] }}</footer>
</div>
</body>
</html>
"""

_env = Environment(
    loader=BaseLoader(),
    autoescape=select_autoescape(enabled_extensions=("html", "xml"), default_for_string=True),
)


# ================================================================================
# Result Parsing
# ================================================================================

@dataclass
class ReportSummary:
    """Summary of scenario results."""
    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    duration: float = 0.0
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def pass_rate(self) -> float:
        """Calculate pass rate percentage."""
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
            "pass_rate": f"{self.pass_rate:.2f}%",
            "duration": round(self.duration, 3),
            "timestamp": self.timestamp,
        }


def summarize(results: Iterable[ScenarioResult]) -> ReportSummary:
    summary = ReportSummary()
    for result in results:
        summary.total += 1
        if result.status == "passed":
            summary.passed += 1
        elif result.status == "failed":
            summary.failed += 1
        else:
            summary.skipped += 1
        summary.duration += result.duration or 0.0
    return summary


def _cucumber_scenarios(document: List[Dict[str, Any]]) -> List[ScenarioResult]:
    """Flatten a Cucumber JSON document into scenario results."""
    results = []
    for feature in document:
        for element in feature.get("elements", []):
            if element.get("type", "scenario") == "background":
                continue

            steps = element.get("steps", [])
            statuses = [step.get("result", {}).get("status", "skipped") for step in steps]
            errors = [
                step["result"]["error_message"]
                for step in steps
                if step.get("result", {}).get("error_message")
            ]
            if "failed" in statuses:
                status = "failed"
            elif statuses and all(s == "passed" for s in statuses):
                status = "passed"
            else:
                status = "skipped"

            screenshot = None
            for step in steps:
                for embedding in step.get("embeddings", []):
                    if embedding.get("mime_type") == "image/png":
                        screenshot = base64.b64decode(embedding["data"])

            # Cucumber step durations are nanoseconds
            duration = sum(step.get("result", {}).get("duration", 0) for step in steps) / 1e9

            results.append(ScenarioResult(
                name=element.get("name", ""),
                status=status,
                screenshot=screenshot,
                error="\n".join(errors) or None,
                feature=feature.get("name", ""),
                duration=duration,
            ))
    return results


def load_results(path: Path) -> List[ScenarioResult]:
    """
    Read scenario results from a run log or a Cucumber JSON file.

    Raises:
        ReportGenerationError: file missing or not valid JSON / JSON lines.
    """
    path = Path(path)
    if not path.is_file():
        raise ReportGenerationError(f"Run log not found: {path}")

    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return []

    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        document = None

    try:
        if isinstance(document, list):
            return _cucumber_scenarios(document)
        if isinstance(document, dict):
            return [ScenarioResult.from_dict(document)]
        return [
            ScenarioResult.from_dict(json.loads(line))
            for line in text.splitlines()
            if line.strip()
        ]
    except (ValueError, TypeError, KeyError) as e:
        raise ReportGenerationError(f"Unreadable run log {path}: {e}") from e


def _distinct(values: Iterable[str]) -> List[str]:
    """Non-empty values in first-seen order, upper-cased."""
    seen: List[str] = []
    for value in values:
        value = (value or "").strip().upper()
        if value and value not in seen:
            seen.append(value)
    return seen


# ================================================================================
# Report Generation
# ================================================================================

class ReportGenerator:
    """
    Builds the HTML report for a finished run.

    Usage:
        generator = ReportGenerator(Config.load())
        report_dir = generator.generate()             # configured jsonFilePath
        report_dir = generator.generate(["a.jsonl", "cucumber.json"])
    """

    REPORT_FILE = "index.html"
    CLASSIFICATIONS_FILE = "classifications.json"

    def __init__(self, config: Config):
        self.config = config

    def classifications(
        self,
        timestamp: str,
        results: Sequence[ScenarioResult] = (),
    ) -> Dict[str, str]:
        """
        Run metadata shown in the report.

        Browser and Environment come from what the scenarios actually ran
        on; configuration is only used when the results do not record it.
        """
        browsers = _distinct(r.browser for r in results)
        environments = _distinct(r.environment for r in results)
        environment = os.environ.get(ENVIRONMENT_OVERRIDE_VAR) or self.config.get("environment")
        return {
            "Project": self.config.get("projectName"),
            "Author": self.config.get("reportAuthor"),
            "Browser": ", ".join(browsers) or self.config.get("browserType").upper(),
            "Platform": platform.system(),
            "Environment": ", ".join(environments) or environment.upper(),
            "Execution Time": timestamp,
        }

    def collect(self, json_files: Sequence[Union[str, Path]]) -> List[ScenarioResult]:
        results: List[ScenarioResult] = []
        for json_file in json_files:
            results.extend(load_results(Path(json_file)))
        return results

    def generate(self, json_files: Optional[Sequence[Union[str, Path]]] = None) -> Path:
        """
        Generate the report.

        Args:
            json_files: Run logs / Cucumber JSON files. Defaults to the
                        configured jsonFilePath.

        Returns:
            The timestamped report directory.

        Raises:
            ReportGenerationError: missing input or output failure.
        """
        logger.info("Starting HTML Report Generation...")

        if not json_files:
            json_files = [self.config.get_path("jsonFilePath")]
            logger.info(f"Using default run log path: {json_files[0]}")

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        try:
            results = self.collect(json_files)
            summary = summarize(results)
            classifications = self.classifications(timestamp, results)

            report_dir = self.config.get_path("jvmFilePath") / f"Report_{timestamp}"
            report_dir.mkdir(parents=True, exist_ok=True)

            html = _env.from_string(_HTML_TEMPLATE).render(
                generated_at=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
                sources=[Path(f).name for f in json_files],
                summary=summary,
                classifications=classifications,
                scenarios=[self._row(r) for r in results],
            )
            (report_dir / self.REPORT_FILE).write_text(html, encoding="utf-8")
            (report_dir / self.CLASSIFICATIONS_FILE).write_text(
                json.dumps(
                    {"classifications": classifications, "summary": summary.to_dict()},
                    indent=2,
                ),
                encoding="utf-8",
            )
        except ReportGenerationError as e:
            logger.error(f"Failed to generate HTML report: {e}")
            raise
        except (OSError, TemplateError) as e:
            logger.error(f"Failed to generate HTML report: {e}")
            raise ReportGenerationError(f"Failed to generate HTML report: {e}") from e

        logger.info("-" * 60)
        logger.info("HTML Report Generated Successfully!")
        logger.info(f"Location : {report_dir.resolve()}")
        logger.info(f"Project  : {classifications['Project']}")
        logger.info(f"Author   : {classifications['Author']}")
        logger.info(f"Env      : {classifications['Environment']}")
        logger.info(f"Time     : {timestamp}")
        logger.info(f"Results  : {summary.passed}/{summary.total} passed")
        logger.info("-" * 60)
        return report_dir

    @staticmethod
    def _row(result: ScenarioResult) -> Dict[str, Any]:
        row = result.to_dict()
        row["duration"] = result.duration or 0.0
        return row


__all__ = [
    "ReportGenerator",
    "ReportSummary",
    "load_results",
    "summarize",
]
