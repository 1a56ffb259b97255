from __future__ import annotations
import logging
from enum import IntEnum
from typing import Optional
from PySide6.QtCore import Qt, QEvent, QPropertyAnimation, QAbstractAnimation, QEasingCurve, Property, Signal, QPointF, QRectF, QSize, QSizeF
from PySide6.QtGui import QPainter, QColor, QPen, QPainterPath, QPolygonF, QPixmap
from PySide6.QtWidgets import QWidget

from ...geometry import DashGeometry, compute_geometry, alpha_for_fraction
from ...settings import Settings
from ...utils import IconSource, to_pixmap, tinted_pixmap

logger = logging.getLogger(__name__)

DEFAULT_ANIMATION_DURATION = 300
DEFAULT_DISABLED_ALPHA = 0.5
DEFAULT_TINT_COLOR = "#000000"


class SwitchState(IntEnum):
    ENABLED = 0
    DISABLED = 1


class SwitchIconView(QWidget):
    """Enabled/disabled icon with an animated diagonal dash and fade."""

    ENABLED = SwitchState.ENABLED
    DISABLED = SwitchState.DISABLED

    stateChanged = Signal(int)

    def __init__(self, icon: IconSource = None, parent=None, *,
                 tint_color=DEFAULT_TINT_COLOR,
                 animation_duration: int = DEFAULT_ANIMATION_DURATION,
                 disabled_alpha: float = DEFAULT_DISABLED_ALPHA,
                 state: SwitchState = SwitchState.ENABLED):
        super().__init__(parent)
        disabled_alpha = float(disabled_alpha)
        if disabled_alpha < 0.0 or disabled_alpha > 1.0:
            raise ValueError(f"Wrong value for disabled_alpha [{disabled_alpha}]. "
                             "Must be value from range [0, 1]")
        if int(animation_duration) <= 0:
            logger.warning("Invalid animation_duration %r, using %d ms",
                           animation_duration, DEFAULT_ANIMATION_DURATION)
            animation_duration = DEFAULT_ANIMATION_DURATION
        if state not in (SwitchState.ENABLED, SwitchState.DISABLED):
            raise ValueError(f"Unknown state [{state}]")

        self._tint = QColor(tint_color)
        self._disabled_alpha = disabled_alpha
        self._duration = int(animation_duration)
        self._state = SwitchState(state)
        self._fraction = 0.0 if self._state == SwitchState.ENABLED else 1.0
        self._alpha = alpha_for_fraction(self._fraction, self._disabled_alpha)

        self._icon_source: IconSource = icon
        self._pixmap: Optional[QPixmap] = None
        self._geometry = compute_geometry(0, 0)
        self._clip = QPolygonF()

        self._anim = QPropertyAnimation(self, b"fraction", self)
        self._anim.setDuration(self._duration)
        self._anim.setEasingCurve(QEasingCurve.OutQuad)

        self._updateGeometry()

    @classmethod
    def fromSettings(cls, settings: Settings, icon: IconSource = None, parent=None) -> "SwitchIconView":
        return cls(
            icon,
            parent,
            tint_color=settings.get("tint_color", DEFAULT_TINT_COLOR),
            animation_duration=settings.get("animation_duration", DEFAULT_ANIMATION_DURATION),
            disabled_alpha=settings.get("disabled_alpha", DEFAULT_DISABLED_ALPHA),
        )

    # --- durum ---------------------------------------------------------------

    def state(self) -> SwitchState:
        return self._state

    def setState(self, state: int, animate: bool = True):
        # Yalnızca iki durum var: geçerli ve farklı bir değer her zaman toggle demek
        if state == self._state:
            return
        if state not in (SwitchState.ENABLED, SwitchState.DISABLED):
            raise ValueError(f"Unknown state [{state}]")
        self.toggle(animate)

    def toggle(self, animate: bool = True):
        if self._state == SwitchState.ENABLED:
            self._state = SwitchState.DISABLED
            target = 1.0
        else:
            self._state = SwitchState.ENABLED
            target = 0.0
        logger.debug("SwitchIconView %s -> %s (animate=%s)", hex(id(self)), self._state.name, animate)
        if animate:
            self._animateTo(target)
        else:
            self._anim.stop()
            self.setFraction(target)
        self.stateChanged.emit(int(self._state))

    def isAnimating(self) -> bool:
        return self._anim.state() == QAbstractAnimation.Running

    def _animateTo(self, target: float):
        # Yarıda kalan animasyon varsa mevcut değerden devam eder
        self._anim.stop()
        self._anim.setStartValue(self._fraction)
        self._anim.setEndValue(target)
        self._anim.start()

    # --- fraction / alpha ----------------------------------------------------

    def getFraction(self) -> float:
        return self._fraction

    def setFraction(self, v: float):
        self._fraction = max(0.0, min(float(v), 1.0))
        self._alpha = alpha_for_fraction(self._fraction, self._disabled_alpha)
        self._updateClip()
        self.update()

    fraction = Property(float, getFraction, setFraction)

    def alpha(self) -> int:
        return self._alpha

    # --- stil ----------------------------------------------------------------

    def tintColor(self) -> QColor:
        return QColor(self._tint)

    def disabledAlpha(self) -> float:
        return self._disabled_alpha

    def animationDuration(self) -> int:
        return self._duration

    def icon(self) -> IconSource:
        return self._icon_source

    def setIcon(self, icon: IconSource):
        self._icon_source = icon
        self._updatePixmap()
        self.update()

    # --- geometri ------------------------------------------------------------

    def dashGeometry(self) -> DashGeometry:
        return self._geometry

    def clipPolygon(self) -> QPolygonF:
        return QPolygonF(self._clip)

    def event(self, e):
        # Margin değişikliği C++ tarafından da gelebilir (layout, stil)
        if e.type() == QEvent.ContentsRectChange:
            self._updateGeometry()
            self.update()
        return super().event(e)

    def sizeHint(self) -> QSize:
        return QSize(48, 48)

    def resizeEvent(self, e):
        super().resizeEvent(e)
        self._updateGeometry()

    def _updateGeometry(self):
        m = self.contentsMargins()
        self._geometry = compute_geometry(self.width(), self.height(),
                                          m.left(), m.top(), m.right(), m.bottom())
        self._updateClip()
        self._updatePixmap()

    def _updateClip(self):
        self._clip = QPolygonF([QPointF(x, y) for x, y in self._geometry.clip_polygon(self._fraction)])

    def _updatePixmap(self):
        rect = self.contentsRect()
        pm = to_pixmap(self._icon_source, rect.size()) if not rect.isEmpty() else None
        self._pixmap = tinted_pixmap(pm, self._tint) if pm is not None else None

    # --- çizim ---------------------------------------------------------------

    def paintEvent(self, e):
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing)
        p.setOpacity(self._alpha / 255.0)

        # Dash, kırpma uygulanmadan önce çizilir
        g = self._geometry
        if g.thickness > 0:
            pen = QPen(self._tint, g.thickness)
            pen.setCapStyle(Qt.FlatCap)
            p.setPen(pen)
            tip_x, tip_y = g.dash_tip(self._fraction)
            p.drawLine(QPointF(*g.dash_start), QPointF(tip_x, tip_y))

        # Dikdörtgen + poligon, OddEven dolgu ile XOR bölgesi verir
        clip = QPainterPath()
        clip.setFillRule(Qt.OddEvenFill)
        clip.addRect(QRectF(self.rect()))
        clip.addPolygon(self._clip)
        clip.closeSubpath()
        p.setClipPath(clip)

        if self._pixmap is not None:
            p.drawPixmap(self._iconRect(), self._pixmap, QRectF(self._pixmap.rect()))
        p.end()

    def _iconRect(self) -> QRectF:
        area = QRectF(self.contentsRect())
        dpr = self._pixmap.devicePixelRatio() or 1.0
        size = QSizeF(self._pixmap.width() / dpr, self._pixmap.height() / dpr)
        size.scale(area.size(), Qt.KeepAspectRatio)
        x = area.x() + (area.width() - size.width()) / 2
        y = area.y() + (area.height() - size.height()) / 2
        return QRectF(x, y, size.width(), size.height())
