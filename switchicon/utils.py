from __future__ import annotations
from pathlib import Path
from typing import Optional, Union
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QColor, QIcon, QPainter, QPixmap

IconSource = Union[QIcon, QPixmap, str, Path, None]


def to_pixmap(source: IconSource, size: QSize) -> Optional[QPixmap]:
    # QIcon en uygun boyutu kendisi seçer; dosya yolu ve QPixmap olduğu gibi kullanılır.
    if source is None:
        return None
    if isinstance(source, QIcon):
        if source.isNull():
            return None
        return source.pixmap(size)
    if isinstance(source, (str, Path)):
        pm = QPixmap(str(source))
    else:
        pm = source
    return None if pm.isNull() else pm


def tinted_pixmap(source: QPixmap, color: QColor) -> QPixmap:
    """Return ``source`` recolored to ``color``, keeping its alpha mask."""
    result = QPixmap(source.size())
    result.setDevicePixelRatio(source.devicePixelRatio())
    result.fill(Qt.transparent)
    p = QPainter(result)
    p.drawPixmap(0, 0, source)
    p.setCompositionMode(QPainter.CompositionMode_SourceIn)
    p.fillRect(result.rect(), color)
    p.end()
    return result
