import sys
import logging
from pathlib import Path

from PySide6.QtWidgets import QApplication, QWidget, QGridLayout, QPushButton, QLabel, QStyle
from PySide6.QtCore import Qt

from .settings import Settings
from .ui.widgets.switch_icon import SwitchIconView, SwitchState

logger = logging.getLogger(__name__)

DEMO_ICONS = [
    ("Ses", QStyle.SP_MediaVolume),
    ("Bilgisayar", QStyle.SP_ComputerIcon),
    ("Ağ", QStyle.SP_DriveNetIcon),
    ("Çöp kutusu", QStyle.SP_TrashIcon),
]


class DemoWindow(QWidget):
    def __init__(self, settings: Settings, parent=None):
        super().__init__(parent)
        self.setWindowTitle("SwitchIcon")
        self.settings = settings
        self.views = []

        grid = QGridLayout(self)
        grid.setContentsMargins(16, 16, 16, 16)
        grid.setHorizontalSpacing(12)
        grid.setVerticalSpacing(8)

        for row, (title, standard) in enumerate(DEMO_ICONS):
            view = SwitchIconView.fromSettings(settings, self.style().standardIcon(standard), self)
            view.setFixedSize(64, 64)
            view.setContentsMargins(6, 6, 6, 6)
            view.stateChanged.connect(lambda s, t=title: logger.info("%s: %s", t, SwitchState(s).name))
            self.views.append(view)

            btn_anim = QPushButton("Değiştir")
            btn_anim.clicked.connect(lambda _=False, v=view: v.toggle())
            btn_now = QPushButton("Animasyonsuz")
            btn_now.clicked.connect(lambda _=False, v=view: v.toggle(animate=False))

            grid.addWidget(QLabel(title), row, 0, Qt.AlignVCenter)
            grid.addWidget(view, row, 1)
            grid.addWidget(btn_anim, row, 2)
            grid.addWidget(btn_now, row, 3)

        btn_all = QPushButton("Hepsini devre dışı bırak")
        btn_all.clicked.connect(self.disable_all)
        grid.addWidget(btn_all, len(DEMO_ICONS), 0, 1, 4)

    def disable_all(self):
        for view in self.views:
            view.setState(SwitchState.DISABLED)


def main(argv=None):
    argv = list(sys.argv if argv is None else argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    app = QApplication.instance() or QApplication(argv)
    app.setApplicationName("SwitchIcon")

    settings = Settings(Path(argv[1]) if len(argv) > 1 else Path("switchicon.json"))
    settings.load()

    try:
        window = DemoWindow(settings)
    except ValueError as e:
        logger.error("Invalid settings in %s: %s", settings.path, e)
        return 1
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
