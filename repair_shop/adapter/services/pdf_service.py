"""ReportLab PDF Generation Service Implementation

Implements the service order document using ReportLab library.
"""

from io import BytesIO
from xml.sax.saxutils import escape
from typing import List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from repair_shop.app.services.pdf_service import PdfService
from repair_shop.domain.client import Client
from repair_shop.domain.money import format_currency, format_price
from repair_shop.domain.order import Order
from repair_shop.domain.order_item import OrderItem
from repair_shop.domain.order_ledger import OrderLedger
from repair_shop.domain.payment import Payment


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Generates the service order receipt handed to the client when the
    equipment is received or delivered.
    """

    def __init__(
        self,
        shop_name: str = "Taller de Computadores",
        shop_address: str = "",
        shop_phone: str = "",
        service_conditions: str = "",
    ):
        self.shop_name = shop_name
        self.shop_address = shop_address
        self.shop_phone = shop_phone
        self.service_conditions = service_conditions

    def generate_service_order(
        self,
        order: Order,
        client: Client,
        items: List[OrderItem],
        payments: List[Payment],
        ledger: OrderLedger,
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
            title=f"Orden de servicio #{order.order_number}",
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=20,
            alignment=1,
            spaceAfter=4,
            textColor=colors.HexColor("#2C3E50"),
        )
        header_style = ParagraphStyle(
            "HeaderStyle",
            parent=styles["Normal"],
            fontSize=9,
            alignment=1,
            textColor=colors.HexColor("#7F8C8D"),
        )
        section_style = ParagraphStyle(
            "SectionStyle",
            parent=styles["Heading3"],
            fontSize=11,
            spaceBefore=6,
            spaceAfter=4,
            textColor=colors.HexColor("#2C3E50"),
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=9,
        )

        # Header - shop info
        elements.append(Paragraph(escape(self.shop_name), title_style))
        contact = " | ".join(part for part in (self.shop_address, self.shop_phone) if part)
        if contact:
            elements.append(Paragraph(escape(contact), header_style))
        elements.append(Spacer(1, 6 * mm))

        info_style = TableStyle(
            [
                ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("TEXTCOLOR", (0, 0), (0, -1), colors.HexColor("#7F8C8D")),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
            ]
        )

        # Order details
        order_info = [
            ["Orden N°:", str(order.order_number)],
            ["Fecha:", order.created_at.strftime("%Y-%m-%d %H:%M")],
            ["Estado:", order.status.label],
        ]
        if order.received_by:
            order_info.append(["Recibido por:", order.received_by])
        if order.assigned_technician:
            order_info.append(["Técnico:", order.assigned_technician])

        order_table = Table(order_info, colWidths=[35 * mm, 135 * mm])
        order_table.setStyle(info_style)
        elements.append(order_table)

        # Client
        elements.append(Paragraph("Cliente", section_style))
        client_info = [
            ["Nombre:", client.name],
            ["Teléfono:", client.phone],
        ]
        if client.document_number:
            client_info.append(
                ["Documento:", f"{client.document_type or ''} {client.document_number}".strip()]
            )
        if client.email:
            client_info.append(["Email:", client.email])
        client_table = Table(client_info, colWidths=[35 * mm, 135 * mm])
        client_table.setStyle(info_style)
        elements.append(client_table)

        # Equipment
        elements.append(Paragraph("Equipo", section_style))
        equipment_info = [
            ["Equipo:", Paragraph(escape(order.equipment_description), normal_style)],
            ["Motivo:", Paragraph(escape(order.visit_reason), normal_style)],
            ["Trabajo:", Paragraph(escape(order.work_to_do), normal_style)],
        ]
        if order.observations:
            equipment_info.append(["Observaciones:", Paragraph(escape(order.observations), normal_style)])
        equipment_table = Table(equipment_info, colWidths=[35 * mm, 135 * mm])
        equipment_table.setStyle(info_style)
        elements.append(equipment_table)

        # Line items
        elements.append(Paragraph("Servicios", section_style))
        line_data = [["Descripción", "Cant.", "Precio", "Subtotal"]]
        for item in items:
            line_data.append(
                [
                    Paragraph(escape(item.description), normal_style),
                    str(item.quantity),
                    format_price(item.unit_price),
                    format_price(item.subtotal),
                ]
            )
        if not items:
            line_data.append(["Sin servicios registrados", "", "", ""])

        line_table = Table(line_data, colWidths=[90 * mm, 15 * mm, 30 * mm, 35 * mm])
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 9),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 4 * mm))

        # Totals
        totals_data = [
            ["", "", "Total:", ledger.display_total()],
            ["", "", "Abonado:", format_currency(ledger.paid)],
            ["", "", "Saldo:", format_currency(ledger.outstanding)],
        ]
        totals_table = Table(totals_data, colWidths=[90 * mm, 15 * mm, 30 * mm, 35 * mm])
        totals_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (2, 0), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (2, 0), (-1, 0), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)

        # Payments
        if payments:
            elements.append(Paragraph("Abonos", section_style))
            payment_data = [
                [payment.paid_at.strftime("%Y-%m-%d %H:%M"), format_currency(payment.amount)]
                for payment in payments
            ]
            payment_table = Table(payment_data, colWidths=[60 * mm, 35 * mm])
            payment_table.setStyle(
                TableStyle(
                    [
                        ("FONTSIZE", (0, 0), (-1, -1), 9),
                        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                        ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.HexColor("#BDC3C7")),
                    ]
                )
            )
            elements.append(payment_table)

        # Conditions
        if self.service_conditions:
            elements.append(Spacer(1, 8 * mm))
            elements.append(
                Paragraph(
                    f"<i>{escape(self.service_conditions)}</i>",
                    ParagraphStyle(
                        "FooterNote",
                        parent=styles["Normal"],
                        fontSize=8,
                        textColor=colors.HexColor("#95A5A6"),
                    ),
                )
            )
            accepted = "Sí" if order.conditions_accepted else "No"
            elements.append(Paragraph(f"Condiciones aceptadas por el cliente: {accepted}", normal_style))

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
