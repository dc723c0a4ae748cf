from pathlib import Path
import json
from typing import Any, Dict, List

import numpy as np


def _to_jsonable(x: Any) -> Any:
    if isinstance(x, np.integer):
        return int(x)
    if isinstance(x, np.floating):
        return float(x)
    if isinstance(x, np.ndarray):
        return x.tolist()
    return str(x)


def make_run_dirs(base: str, run_id: str) -> Dict[str, str]:
    basep = Path(base) / run_id
    basep.mkdir(parents=True, exist_ok=True)
    return {'output_dir': str(basep)}


def write_report(report: Dict[str, Any], output_dir: str) -> List[str]:
    p = Path(output_dir)
    with open(p / 'report.json', 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, default=_to_jsonable)

    md_lines = []
    md_lines.append("# Analysis Report\n")
    md_lines.append(f"**Run ID:** {report.get('run_id')}\n")
    md_lines.append(f"**Analysis:** {report.get('kind')}\n")
    md_lines.append(f"**Column:** {report.get('column')}\n")
    meta = report.get('meta') or {}
    if meta.get('source'):
        md_lines.append(f"**Source:** {meta.get('source')} ({meta.get('rows')} rows × {meta.get('cols')} cols)\n")

    md_lines.append("## Report\n")
    md_lines.append('```')
    md_lines.append(report.get('report_text') or '')
    md_lines.append('```')

    comp = report.get('computed') or {}
    if comp:
        md_lines.append('\n## Computed Values\n')
        for k, v in comp.items():
            if isinstance(v, (list, dict)):
                v = json.dumps(v, default=_to_jsonable)[:500]
            md_lines.append(f"- **{k}**: {v}")

    chart = report.get('chart')
    if chart:
        md_lines.append('\n## Chart\n')
        md_lines.append(f"- {chart.get('title')} ({chart.get('chart_type')}), data in report.json")

    for section in ('warnings', 'errors'):
        items = report.get(section) or []
        if items:
            md_lines.append(f"\n## {section.title()}\n")
            md_lines.extend(f"- {w}" for w in items)

    (p / 'report.md').write_text('\n'.join(md_lines), encoding='utf-8')
    return ['report.json', 'report.md']
