"""Replays renderer primitives onto a QPainter."""

import math

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen, QPolygonF

from . import renderers as r


def qt_arc_angles(arc: r.Arc) -> tuple[int, int]:
    """
    Convert a screen-clockwise arc to QPainter (start, span) in 1/16 degree.

    Qt measures angles counter-clockwise on screen, so angles are negated;
    an anticlockwise sweep becomes a positive span.
    """
    start = math.degrees(arc.start)
    end = math.degrees(arc.end)
    if abs(end - start) >= 360:
        sweep = 360.0
    elif arc.anticlockwise:
        sweep = (start - end) % 360
    else:
        sweep = -((end - start) % 360)
    return round(-start * 16), round(sweep * 16)


class QtPainterBackend:
    """Draws primitive sequences with an active QPainter."""

    def __init__(self, painter: QPainter):
        self.painter = painter
        self._color = QColor(Qt.GlobalColor.black)
        self._handlers = {
            r.Save: self._save,
            r.Restore: self._restore,
            r.Translate: lambda op: painter.translate(op.dx, op.dy),
            r.Rotate: lambda op: painter.rotate(math.degrees(op.angle)),
            r.Scale: lambda op: painter.scale(op.sx, op.sy),
            r.SetPen: self._set_pen,
            r.SetOpacity: lambda op: painter.setOpacity(op.alpha),
            r.Line: lambda op: painter.drawLine(QPointF(op.x1, op.y1), QPointF(op.x2, op.y2)),
            r.Polyline: self._polyline,
            r.Arc: self._arc,
            r.Circle: self._circle,
            r.Rect: lambda op: painter.drawRect(QRectF(op.x, op.y, op.width, op.height)),
            r.Text: self._text,
        }

    def replay(self, ops) -> None:
        for op in ops:
            self._handlers[type(op)](op)

    def _save(self, op):
        self.painter.save()

    def _restore(self, op):
        self.painter.restore()

    def _set_pen(self, op: r.SetPen):
        self._color = QColor(op.color)
        pen = QPen(self._color, op.width)
        if op.dash and op.width > 0:
            pen.setDashPattern([d / op.width for d in op.dash])
        self.painter.setPen(pen)
        self.painter.setBrush(Qt.BrushStyle.NoBrush)

    def _polyline(self, op: r.Polyline):
        self.painter.drawPolyline(QPolygonF([QPointF(x, y) for x, y in op.points]))

    def _arc(self, op: r.Arc):
        rect = QRectF(op.cx - op.radius, op.cy - op.radius, 2 * op.radius, 2 * op.radius)
        start, span = qt_arc_angles(op)
        self.painter.drawArc(rect, start, span)

    def _circle(self, op: r.Circle):
        self.painter.save()
        if op.filled:
            self.painter.setBrush(QBrush(self._color))
        self.painter.drawEllipse(QPointF(op.cx, op.cy), op.radius, op.radius)
        self.painter.restore()

    def _text(self, op: r.Text):
        font = QFont(self.painter.font())
        font.setPixelSize(max(1, round(op.size)))
        self.painter.setFont(font)
        advance = QFontMetricsF(font).horizontalAdvance(op.text)
        x = op.x
        if op.align == "center":
            x -= advance / 2
        elif op.align == "right":
            x -= advance
        self.painter.drawText(QPointF(x, op.y), op.text)
