from __future__ import annotations

import csv
import io
import math
from datetime import datetime, timezone

from fpdf import FPDF

from seo_inspector.models import SEOReport
from seo_inspector.scoring import score_grade

# ---------------------------------------------------------------------------
# Colour constants (RGB tuples)
# ---------------------------------------------------------------------------
GREEN = (34, 197, 94)
YELLOW = (245, 158, 11)
RED = (239, 68, 68)
BLUE = (59, 130, 246)
DARK_BG = (30, 41, 59)
LIGHT_TEXT = (226, 232, 240)
WHITE = (255, 255, 255)
GREY = (148, 163, 184)

FACTORS: list[tuple[str, str]] = [
    ("Title Tag", "title"),
    ("Meta Description", "description"),
    ("Canonical URL", "canonical"),
    ("Social Tags", "social"),
]

STATUS_COLORS: dict[str, tuple[int, int, int]] = {
    "good": GREEN,
    "warning": YELLOW,
    "error": RED,
    "needs improvement": YELLOW,
}

RECOMMENDATION_COLORS: dict[str, tuple[int, int, int]] = {
    "success": GREEN,
    "warning": YELLOW,
    "error": RED,
    "info": BLUE,
}


def _score_color(score: int) -> tuple[int, int, int]:
    if score >= 80:
        return GREEN
    if score >= 50:
        return YELLOW
    return RED


def _latin1(text: str) -> str:
    """Core PDF fonts only cover latin-1."""
    return text.encode("latin-1", "replace").decode("latin-1")


def _heading_row(report: SEOReport) -> tuple[str, str]:
    status = "good" if len(report.h1) == 1 else "needs improvement"
    details = f"H1: {len(report.h1)}, H2: {len(report.h2)}, H3: {len(report.h3)}"
    return status, details


def _findings(report: SEOReport) -> list[tuple[str, str, str]]:
    rows = []
    for label, key in FACTORS:
        check = report.status_checks.get(key)
        rows.append((label, check.status if check else "not analyzed", check.message if check else ""))
    rows.append(("Heading Structure", *_heading_row(report)))
    return rows


# ===================================================================
# CSV
# ===================================================================

def generate_csv(report: SEOReport, generated: datetime | None = None) -> str:
    generated = generated or datetime.now(timezone.utc)
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")

    writer.writerow(["SEO Analysis Report", "", ""])
    writer.writerow([f"URL: {report.url}", "", ""])
    writer.writerow([f"Date: {generated.strftime('%Y-%m-%d')}", "", ""])
    writer.writerow([f"Overall Score: {report.score}/100", "", ""])
    writer.writerow(["", "", ""])
    writer.writerow(["Factor", "Status", "Details"])
    for row in _findings(report):
        writer.writerow(row)
    writer.writerow(["", "", ""])
    writer.writerow(["Recommendations:", "", ""])
    for i, rec in enumerate(report.recommendations, start=1):
        writer.writerow([f"{i}. {rec.title}", rec.type, rec.description])

    return buf.getvalue()


# ===================================================================
# PDF
# ===================================================================

class SEOReportPDF(FPDF):
    def __init__(self) -> None:
        super().__init__(orientation="P", unit="mm", format="A4")
        self.set_auto_page_break(auto=True, margin=20)

    def _set_color(self, rgb: tuple[int, int, int]) -> None:
        self.set_text_color(*rgb)

    def dark_page(self) -> None:
        self.add_page()
        self.set_fill_color(*DARK_BG)
        self.rect(0, 0, self.w, self.h, "F")

    def section_title(self, text: str) -> None:
        self.set_font("Helvetica", "B", 20)
        self._set_color(WHITE)
        self.set_xy(15, 15)
        self.cell(0, 10, text, new_x="LMARGIN", new_y="NEXT")
        self.set_draw_color(*GREY)
        self.set_line_width(0.3)
        self.line(15, 28, self.w - 15, 28)
        self.set_y(33)

    def ensure_space(self, height: float) -> None:
        if self.get_y() + height > self.h - 15:
            self.dark_page()
            self.set_y(15)


def _draw_arc(
    pdf: SEOReportPDF,
    cx: float,
    cy: float,
    r: float,
    start_deg: float,
    end_deg: float,
) -> None:
    """Draw an arc as small line segments."""
    steps = max(30, int(abs(end_deg - start_deg) / 2))
    pts: list[tuple[float, float]] = []
    for i in range(steps + 1):
        angle = math.radians(start_deg + (end_deg - start_deg) * i / steps)
        pts.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
    for i in range(len(pts) - 1):
        pdf.line(pts[i][0], pts[i][1], pts[i + 1][0], pts[i + 1][1])


def _render_cover(pdf: SEOReportPDF, report: SEOReport, generated: datetime) -> None:
    pdf.dark_page()
    page_w = pdf.w

    pdf.set_font("Helvetica", "B", 32)
    pdf._set_color(WHITE)
    pdf.set_y(50)
    pdf.cell(0, 14, "SEO Analysis Report", align="C", new_x="LMARGIN", new_y="NEXT")

    pdf.set_font("Helvetica", "", 13)
    pdf._set_color(GREY)
    pdf.set_y(72)
    pdf.cell(0, 8, _latin1(report.url), align="C", new_x="LMARGIN", new_y="NEXT")

    pdf.set_font("Helvetica", "", 10)
    pdf.set_y(84)
    pdf.cell(0, 6, f"Generated {generated.strftime('%B %d, %Y at %H:%M UTC')}", align="C", new_x="LMARGIN", new_y="NEXT")

    # Score gauge, 270 degree arc
    cx, cy = page_w / 2, 145
    radius = 38
    score = report.score
    color = _score_color(score)
    start_angle = 135
    sweep = 270
    pdf.set_draw_color(80, 90, 110)
    pdf.set_line_width(3.5)
    _draw_arc(pdf, cx, cy, radius, start_angle, start_angle + sweep)

    fg_sweep = sweep * score / 100
    if fg_sweep > 0:
        pdf.set_draw_color(*color)
        _draw_arc(pdf, cx, cy, radius, start_angle, start_angle + fg_sweep)

    pdf.set_font("Helvetica", "B", 36)
    pdf._set_color(color)
    score_str = str(score)
    tw = pdf.get_string_width(score_str)
    pdf.set_xy(cx - tw / 2, cy - 12)
    pdf.cell(tw, 14, score_str)

    label = f"Grade {report.grade or score_grade(score)}"
    pdf.set_font("Helvetica", "", 12)
    pdf._set_color(GREY)
    lw = pdf.get_string_width(label)
    pdf.set_xy(cx - lw / 2, cy + 6)
    pdf.cell(lw, 6, label)

    pdf.set_font("Helvetica", "", 9)
    ow = pdf.get_string_width("out of 100")
    pdf.set_xy(cx - ow / 2, cy + 15)
    pdf.cell(ow, 5, "out of 100")


def _render_findings(pdf: SEOReportPDF, report: SEOReport) -> None:
    pdf.dark_page()
    pdf.section_title("Key Findings")

    for label, status, details in _findings(report):
        pdf.ensure_space(14)
        y = pdf.get_y()
        pdf.set_font("Helvetica", "B", 11)
        pdf._set_color(WHITE)
        pdf.set_xy(15, y)
        pdf.cell(60, 7, _latin1(label))
        pdf.set_font("Helvetica", "B", 9)
        pdf._set_color(STATUS_COLORS.get(status, GREY))
        pdf.cell(0, 7, _latin1(status.upper()), new_x="LMARGIN", new_y="NEXT")
        if details:
            pdf.set_font("Helvetica", "", 9)
            pdf._set_color(LIGHT_TEXT)
            pdf.set_x(15)
            pdf.multi_cell(pdf.w - 30, 5, _latin1(details))
        pdf.set_y(pdf.get_y() + 3)


def _render_recommendations(pdf: SEOReportPDF, report: SEOReport) -> None:
    pdf.set_y(pdf.get_y() + 6)
    pdf.ensure_space(20)
    pdf.set_font("Helvetica", "B", 16)
    pdf._set_color(WHITE)
    pdf.set_x(15)
    pdf.cell(0, 10, "Recommendations", new_x="LMARGIN", new_y="NEXT")

    if not report.recommendations:
        pdf.set_font("Helvetica", "", 10)
        pdf._set_color(GREEN)
        pdf.set_x(15)
        pdf.cell(0, 6, "No recommendations.", new_x="LMARGIN", new_y="NEXT")
        return

    for i, rec in enumerate(report.recommendations, start=1):
        pdf.ensure_space(16)
        pdf.set_font("Helvetica", "B", 10)
        pdf._set_color(RECOMMENDATION_COLORS.get(rec.type, GREY))
        pdf.set_x(15)
        pdf.cell(0, 6, _latin1(f"{i}. {rec.title}"), new_x="LMARGIN", new_y="NEXT")
        pdf.set_font("Helvetica", "", 9)
        pdf._set_color(LIGHT_TEXT)
        pdf.set_x(20)
        pdf.multi_cell(pdf.w - 35, 4.5, _latin1(rec.description))
        pdf.set_y(pdf.get_y() + 2)


def generate_pdf(report: SEOReport, generated: datetime | None = None) -> bytes:
    """Render the report as a PDF and return raw bytes."""
    generated = generated or datetime.now(timezone.utc)
    pdf = SEOReportPDF()

    _render_cover(pdf, report, generated)
    _render_findings(pdf, report)
    _render_recommendations(pdf, report)

    return bytes(pdf.output())
