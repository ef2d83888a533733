import io
from datetime import date
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from sellsheet.domain.CalculationSummary import CalculationSummary
from sellsheet.domain.CalculatorState import CalculatorState
from sellsheet.logic.profit.engine import validate_ingredient
from sellsheet.logic.reporting.formatting import format_currency, format_percentage
from sellsheet.utilities.constants import REPORT_TITLE
from sellsheet.utilities.export_import import format_plain_number


def generate_pdf_for_analysis(state: CalculatorState, summary: CalculationSummary,
                              generated_on: Optional[date] = None) -> bytes:
    """Generate a one-page report: summary lines then an Ingredient / Quantity / Unit / Cost table."""
    generated_on = generated_on or date.today()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20,
        title=REPORT_TITLE,
    )

    styles = getSampleStyleSheet()
    analysis = summary.analysis
    named = [ing for ing in state.ingredients if isinstance(ing.name, str) and ing.name]
    lines = [
        f"Generated on: {generated_on.strftime('%m/%d/%Y')}",
        f"Total Ingredients: {len(named)}",
        f"Selling Price: {format_currency(summary.selling_price)}",
        f"Total Cost: {format_currency(summary.total_cost)}",
        f"Profit: {format_currency(analysis.total_profit)}",
        f"Profit Margin: {format_percentage(analysis.profit_margin)}",
    ]
    elements = [Paragraph(REPORT_TITLE, styles["Title"]), Spacer(1, 12)]
    elements.extend(Paragraph(line, styles["Normal"]) for line in lines)
    elements.append(Spacer(1, 16))

    data = [["Ingredient", "Quantity", "Unit", "Cost"]]
    for ing in state.ingredients:
        if not validate_ingredient(ing):
            continue
        data.append([ing.name, format_plain_number(ing.quantity), ing.unit, format_currency(ing.cost)])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2563EB")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 11),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
