"""Report generation module for tiling comparison results."""

import json
from datetime import datetime
from pathlib import Path

from .types import ComparisonReport

FORMATS = ("json", "text")


class ReportGenerator:
    """Generates report formats for comparison results."""

    def generate_json(self, report: ComparisonReport, indent: int = 2) -> str:
        """
        Generate JSON format report.

        Args:
            report: ComparisonReport object
            indent: JSON indentation level

        Returns:
            JSON string
        """
        return json.dumps(report.model_dump(), ensure_ascii=False, indent=indent)

    def generate_text(self, report: ComparisonReport, max_matches: int = 10) -> str:
        """
        Generate plain text format report.

        Args:
            report: ComparisonReport object
            max_matches: Maximum number of tiles to list

        Returns:
            Plain text report
        """
        lines = []
        lines.append("=" * 60)
        lines.append("GREEDY STRING TILING REPORT")
        lines.append("=" * 60)
        lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append("")

        lines.append("FILES ANALYZED:")
        lines.append(f"  Source: {report.source_file}")
        lines.append(f"          Tokens: {report.source_tokens:,} (id {report.source_id})")
        lines.append(f"  Target: {report.target_file}")
        lines.append(f"          Tokens: {report.target_tokens:,} (id {report.target_id})")
        lines.append("")

        lines.append("DETECTION SETTINGS:")
        lines.append(f"  Granularity: {report.granularity}")
        lines.append(f"  Minimal Matching Length: {report.minimal_matching_length}")
        lines.append(f"  Threshold: {report.threshold:.2f}")
        lines.append("")

        lines.append("RESULTS SUMMARY:")
        lines.append(f"  Tiles Found: {report.total_tiles}")
        lines.append(f"  Tokens Covered: {report.metadata.get('coverage', 0):,}")
        lines.append(f"  Similarity: {report.similarity_percentage:.1f}%")
        lines.append(f"  Suspected Plagiarism: {'yes' if report.suspected_plagiarism else 'no'}")
        lines.append("")

        if report.matches:
            lines.append("LONGEST TILES:")
            lines.append("-" * 60)

            for i, match in enumerate(report.matches[:max_matches], 1):
                lines.append(f"\nTile #{i} ({match.length} tokens)")
                lines.append(
                    f"Position: Source[{match.source_start}:{match.source_end}] -> "
                    f"Target[{match.target_start}:{match.target_end}]"
                )

                preview = match.source_text[:200]
                if len(match.source_text) > 200:
                    preview += "..."
                lines.append(f"Text: {preview}")
                lines.append("-" * 60)

            if len(report.matches) > max_matches:
                lines.append(f"\n... and {len(report.matches) - max_matches} more tiles")
        else:
            lines.append("No common substructure found.")

        return "\n".join(lines)

    def render(self, report: ComparisonReport, format: str = "json") -> str:
        """Render a report in the requested format."""
        if format == "json":
            return self.generate_json(report)
        if format == "text":
            return self.generate_text(report)
        raise ValueError(f"Unsupported format: {format}")

    def save_report(
        self,
        report: ComparisonReport,
        output_path: str,
        format: str = "json"
    ):
        """
        Save report to file.

        Args:
            report: ComparisonReport object
            output_path: Path to save the report
            format: Output format (json, text)
        """
        content = self.render(report, format)
        Path(output_path).write_text(content, encoding='utf-8')
