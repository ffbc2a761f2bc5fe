"""Result export service.

Renders a finished calculation as JSON, plain text, CSV or PDF through a
registry of export plugins. Additional formats can be registered at
runtime with ``ExportService.register_plugin``.
"""

import csv
import io
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from io import BytesIO
from typing import Any, Callable, Optional, Union

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from medcalc.core.logging import UserActionLogger, user_action_logger
from medcalc.schemas.bundle import CalculatorConfig, ExportData, ExportMetadata
from medcalc.schemas.patient import PatientData
from medcalc.scoring.result import CalculationResult
from medcalc.scoring.types import RiskLevel
from medcalc.utils.gender import get_gender_label_by_age

logger = logging.getLogger(__name__)

ExportOutput = Union[str, bytes]


@dataclass(frozen=True)
class ExportPlugin:
    """A named export format."""

    format: str
    name: str
    description: str
    export: Callable[[ExportData], ExportOutput]


def _format_number(value: float) -> str:
    return f"{value:g}"


def _patient_rows(data: ExportData) -> list[tuple[str, str]]:
    """Patient fields as (key, display value) pairs, gender in Danish."""
    rows = []
    for key, value in data.patient.to_payload().items():
        if key == "gender":
            value = get_gender_label_by_age(value, data.patient.age)
        rows.append((key, str(value)))
    return rows


def format_results_as_text(data: ExportData) -> str:
    """Render an export bundle as a Danish plain-text report."""
    result = data.result
    lines = [
        f"{data.calculator.name} - Resultat",
        "",
        "Patient Information:",
        *(f"  {key}: {value}" for key, value in _patient_rows(data)),
        "",
        "Resultat:",
        f"  Score: {result.score}",
        f"  Risiko niveau: {result.risk_level.value}",
        f"  Fortolkning: {result.interpretation}",
        "",
        "Anbefalinger:",
        *(f"  - {rec}" for rec in result.recommendations),
        "",
        "Metadata:",
        f"  Session ID: {data.metadata.session_id}",
        f"  Varighed: {_format_number(data.metadata.duration)} sekunder",
        f"  Eksporteret: {data.metadata.export_time.isoformat()}",
    ]
    return "\n".join(lines).strip()


def export_json(data: ExportData) -> str:
    return json.dumps(data.to_payload(), indent=2, ensure_ascii=False)


def export_csv(data: ExportData) -> str:
    """Render an export bundle as a two-column field/value CSV.

    Rows are grouped by section prefix (``patient.``, ``responses.``,
    ``result.``, ``metadata.``); list values are joined with ``; ``.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["field", "value"])

    writer.writerow(["calculator.type", data.calculator.type])
    writer.writerow(["calculator.name", data.calculator.name])
    writer.writerow(["calculator.version", data.calculator.version])

    for key, value in _patient_rows(data):
        writer.writerow([f"patient.{key}", value])

    for key, value in data.responses.items():
        writer.writerow([f"responses.{key}", value])

    result = data.result
    writer.writerow(["result.score", result.score])
    writer.writerow(["result.riskLevel", result.risk_level.value])
    writer.writerow(["result.interpretation", result.interpretation])
    writer.writerow(["result.recommendations", "; ".join(result.recommendations)])
    if result.warnings:
        writer.writerow(["result.warnings", "; ".join(result.warnings)])

    writer.writerow(["metadata.sessionId", data.metadata.session_id])
    writer.writerow(["metadata.duration", _format_number(data.metadata.duration)])
    writer.writerow(["metadata.exportTime", data.metadata.export_time.isoformat()])

    return buffer.getvalue()


class PDFExporter:
    """Exports calculation results to PDF format."""

    RISK_COLORS = {
        RiskLevel.HIGH: colors.red,
        RiskLevel.SEVERE: colors.red,
        RiskLevel.VERY_HIGH: colors.red,
        RiskLevel.MODERATE: colors.orange,
        RiskLevel.MEDIUM: colors.orange,
        RiskLevel.MILD: colors.orange,
        RiskLevel.LOW: colors.green,
        RiskLevel.MINIMAL: colors.green,
    }

    def __init__(self) -> None:
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    def _setup_styles(self) -> None:
        """Setup custom paragraph styles."""
        self.styles.add(ParagraphStyle(
            name="Header",
            parent=self.styles["Heading1"],
            fontSize=16,
            spaceAfter=12,
        ))
        self.styles.add(ParagraphStyle(
            name="SectionHeader",
            parent=self.styles["Heading2"],
            fontSize=12,
            spaceAfter=8,
            textColor=colors.darkblue,
        ))
        self.styles.add(ParagraphStyle(
            name="ResultText",
            parent=self.styles["Normal"],
            fontSize=10,
            spaceAfter=6,
        ))
        self.styles.add(ParagraphStyle(
            name="AlertText",
            parent=self.styles["Normal"],
            fontSize=10,
            textColor=colors.red,
            fontName="Helvetica-Bold",
        ))
        self.styles.add(ParagraphStyle(
            name="Footer",
            parent=self.styles["Normal"],
            fontSize=8,
            textColor=colors.grey,
        ))

    def generate_pdf(self, data: ExportData) -> bytes:
        """Generate a PDF report from an export bundle.

        Args:
            data: Export bundle

        Returns:
            PDF bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=20 * mm,
            rightMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"{data.calculator.name} - Resultat",
        )

        story = []
        result = data.result

        story.append(Paragraph(f"{data.calculator.name} - Resultat", self.styles["Header"]))
        story.append(Spacer(1, 5 * mm))

        patient_rows = _patient_rows(data)
        if patient_rows:
            story.append(Paragraph("Patient Information", self.styles["SectionHeader"]))
            patient_table = Table(
                [[f"{key}:", value] for key, value in patient_rows],
                colWidths=[80, 300],
            )
            patient_table.setStyle(TableStyle([
                ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 10),
            ]))
            story.append(patient_table)
            story.append(Spacer(1, 6 * mm))

        story.append(Paragraph("Resultat", self.styles["SectionHeader"]))
        result_table = Table(
            [
                ["Score:", str(result.score)],
                ["Risiko niveau:", result.risk_level.value],
                ["Fortolkning:", result.interpretation],
            ],
            colWidths=[100, 280],
        )
        result_table.setStyle(TableStyle([
            ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
            ("FONTNAME", (1, 1), (1, 1), "Helvetica-Bold"),
            ("TEXTCOLOR", (1, 1), (1, 1), self._get_risk_color(result.risk_level)),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ]))
        story.append(result_table)
        story.append(Spacer(1, 6 * mm))

        if result.warnings:
            for warning in result.warnings:
                story.append(Paragraph(warning, self.styles["AlertText"]))
            story.append(Spacer(1, 6 * mm))

        if result.recommendations:
            story.append(Paragraph("Anbefalinger", self.styles["SectionHeader"]))
            for rec in result.recommendations:
                story.append(Paragraph(f"• {rec}", self.styles["ResultText"]))
            story.append(Spacer(1, 6 * mm))

        if data.responses:
            story.append(Paragraph("Besvarelser", self.styles["SectionHeader"]))
            response_table = Table(
                [[key, str(value)] for key, value in data.responses.items()],
                colWidths=[160, 220],
            )
            response_table.setStyle(TableStyle([
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ]))
            story.append(response_table)
            story.append(Spacer(1, 6 * mm))

        story.append(Spacer(1, 10 * mm))
        footer_text = (
            f"Session ID: {data.metadata.session_id} | "
            f"Varighed: {_format_number(data.metadata.duration)} sekunder | "
            f"Eksporteret: {data.metadata.export_time.strftime('%Y-%m-%d %H:%M UTC')}"
        )
        story.append(Paragraph(footer_text, self.styles["Footer"]))
        story.append(Paragraph(
            "Resultatet er beslutningsstøtte. Kliniske beslutninger træffes af "
            "kvalificeret sundhedspersonale.",
            self.styles["Footer"],
        ))

        doc.build(story)

        return buffer.getvalue()

    def _get_risk_color(self, risk_level: RiskLevel) -> colors.Color:
        """Get color for a risk level."""
        return self.RISK_COLORS.get(risk_level, colors.black)


def export_pdf(data: ExportData) -> bytes:
    return PDFExporter().generate_pdf(data)


BUILT_IN_PLUGINS = (
    ExportPlugin("json", "JSON Export", "Export results as JSON format", export_json),
    ExportPlugin("text", "Text Export", "Export results as plain text", format_results_as_text),
    ExportPlugin("csv", "CSV Export", "Export results as CSV spreadsheet", export_csv),
    ExportPlugin("pdf", "PDF Export", "Export results as PDF document", export_pdf),
)


class ExportService:
    """Registry of export plugins and entry point for exporting results."""

    def __init__(self, action_logger: Optional[UserActionLogger] = None) -> None:
        self.action_logger = action_logger or user_action_logger
        self._plugins: dict[str, ExportPlugin] = {
            plugin.format: plugin for plugin in BUILT_IN_PLUGINS
        }

    def prepare_export_data(
        self,
        config: CalculatorConfig,
        patient: PatientData,
        responses: dict[str, Any],
        result: CalculationResult,
        session_id: str,
        duration: float,
    ) -> ExportData:
        """Bundle a finished calculation for export, stamped with the current time."""
        return ExportData(
            calculator=config,
            patient=patient,
            responses=dict(responses),
            result=result,
            metadata=ExportMetadata(
                session_id=session_id,
                duration=duration,
                export_time=datetime.now(timezone.utc),
            ),
        )

    def export_results(
        self, data: ExportData, format: str = "json"
    ) -> Optional[ExportOutput]:
        """Render an export bundle in the requested format.

        Returns:
            The rendered document, or None if the format is not registered
            or the plugin fails. Failures are logged, never raised.
        """
        plugin = self._plugins.get(format)
        if plugin is None:
            logger.error(
                f"Export failed: export format '{format}' is not supported",
                extra={"calculator_type": data.calculator.type},
            )
            return None

        try:
            document = plugin.export(data)
        except Exception as e:
            logger.exception(
                f"Export failed: {e}",
                extra={"calculator_type": data.calculator.type},
            )
            return None

        self.action_logger.log(
            "results_exported",
            {"format": format, "sessionId": data.metadata.session_id},
            calculator_type=data.calculator.type,
        )
        return document

    def register_plugin(self, plugin: ExportPlugin) -> None:
        """Register a plugin, replacing any existing plugin for its format."""
        self._plugins[plugin.format] = plugin

    def get_available_formats(self) -> list[str]:
        return list(self._plugins)

    def get_plugin(self, format: str) -> Optional[ExportPlugin]:
        return self._plugins.get(format)

    def get_all_plugins(self) -> list[ExportPlugin]:
        return list(self._plugins.values())

    def format_results_as_text(self, data: ExportData) -> str:
        return format_results_as_text(data)
