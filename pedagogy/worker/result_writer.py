import json
from dataclasses import asdict
from pathlib import Path

from pedagogy.analysis.models import DocumentAnalysis
from pedagogy.processor.models import TransformationResult


def analysis_summary(analysis: DocumentAnalysis) -> dict[str, object]:
    """JSON-ready view of an analysis, without the original text."""
    return {
        "timestamp": analysis.timestamp.isoformat(),
        "metadata": asdict(analysis.metadata),
        "discipline": analysis.discipline.value,
        "level": analysis.level.value,
        "content_type": analysis.content_type.value,
        "pedagogical_objectives": dict(analysis.pedagogical_objectives),
        "visual_elements": list(analysis.visual_elements),
        "resources_needed": [asdict(need) for need in analysis.resources_needed],
        "specialized_vocabulary": [asdict(entry) for entry in analysis.specialized_vocabulary],
        "exercises": list(analysis.exercises),
        "transversal_skills": list(analysis.transversal_skills),
    }


class ResultWriter:
    """Writes `<stem>.html`, `<stem>.export.json` and `<stem>.report.json`."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def write(self, stem: str, result: TransformationResult) -> list[Path]:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        report = {
            "analysis": analysis_summary(result.analysis),
            "resources": [asdict(r) for r in result.resources],
            "cognitive_break": asdict(result.document.cognitive_break),
            "validation": asdict(result.validation),
            "usage_guide": asdict(result.usage_guide),
        }
        outputs = {
            self._output_dir / f"{stem}.html": result.document.html,
            self._output_dir / f"{stem}.export.json": self._to_json(result.export_config.as_dict()),
            self._output_dir / f"{stem}.report.json": self._to_json(report),
        }
        for path, content in outputs.items():
            path.write_text(content, encoding="utf-8")
        return list(outputs)

    @staticmethod
    def _to_json(payload: object) -> str:
        return json.dumps(payload, ensure_ascii=False, indent=2)
