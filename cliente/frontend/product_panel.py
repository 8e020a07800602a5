"""Panel para agregar, eliminar, reponer y comprar productos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QComboBox,
    QGroupBox,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import prompt_text, show_error, show_info
from shared.protocol import (
    PRODUCT_TABLE_COLUMNS,
    ActionResult,
    ActionStatus,
    AddProductRequest,
    Command,
    ProductRow,
    RemoveProductRequest,
    StockChangeRequest,
)

if TYPE_CHECKING:
    from cliente.backend.controller import ProductPanelController


class ProductPanel(QWidget):
    """Formulario de alta, tabla de inventario y acciones sobre la fila seleccionada."""

    def __init__(
        self,
        controller: ProductPanelController,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self.setObjectName("productPanel")

        self._type_input: QComboBox
        self._name_input: QLineEdit
        self._quantity_input: QLineEdit
        self._price_input: QLineEdit
        self._add_button: QPushButton
        self._table: QTableWidget
        self._remove_button: QPushButton
        self._restock_button: QPushButton
        self._purchase_button: QPushButton

        self._build_ui()
        self._connect_signals()
        self.refresh_product_table()

    def _build_ui(self) -> None:
        """Construye formulario, tabla y botones de accion."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(16)

        root_layout.addWidget(self._build_form())
        root_layout.addWidget(self._build_table(), stretch=1)
        root_layout.addWidget(self._build_actions())

    def _build_form(self) -> QGroupBox:
        """Seccion ADD PRODUCT."""
        form = QGroupBox("ADD PRODUCT", self)
        layout = QHBoxLayout(form)
        layout.setSpacing(10)

        self._type_input = QComboBox(form)
        self._type_input.addItems(self._controller.list_product_types())

        self._name_input = QLineEdit(form)
        self._name_input.setPlaceholderText("Name")
        self._name_input.setMinimumWidth(220)

        self._quantity_input = QLineEdit(form)
        self._quantity_input.setPlaceholderText("0")
        self._quantity_input.setMaximumWidth(90)

        self._price_input = QLineEdit(form)
        self._price_input.setPlaceholderText("0.00")
        self._price_input.setMaximumWidth(90)

        self._add_button = self._build_button("Add", form)

        layout.addWidget(self._build_label("Type:", form))
        layout.addWidget(self._type_input)
        layout.addWidget(self._build_label("Name:", form))
        layout.addWidget(self._name_input, stretch=1)
        layout.addWidget(self._build_label("Quantity:", form))
        layout.addWidget(self._quantity_input)
        layout.addWidget(self._build_label("Price:", form))
        layout.addWidget(self._price_input)
        layout.addWidget(self._add_button)
        return form

    def _build_table(self) -> QTableWidget:
        """Tabla de solo lectura con seleccion de una fila."""
        self._table = QTableWidget(0, len(PRODUCT_TABLE_COLUMNS), self)
        self._table.setHorizontalHeaderLabels(list(PRODUCT_TABLE_COLUMNS))
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self._table.verticalHeader().setVisible(False)
        self._table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        return self._table

    def _build_actions(self) -> QGroupBox:
        """Seccion ACTIONS."""
        actions = QGroupBox("ACTIONS", self)
        layout = QHBoxLayout(actions)
        layout.setSpacing(10)
        layout.addStretch(1)

        self._remove_button = self._build_button("Remove", actions)
        self._restock_button = self._build_button("Restock", actions)
        self._purchase_button = self._build_button("Purchase", actions)

        layout.addWidget(self._remove_button)
        layout.addWidget(self._restock_button)
        layout.addWidget(self._purchase_button)
        layout.addStretch(1)
        return actions

    def _connect_signals(self) -> None:
        """Conecta botones con comandos del controller."""
        self._add_button.clicked.connect(self._on_add_clicked)
        self._price_input.returnPressed.connect(self._on_add_clicked)
        self._remove_button.clicked.connect(self._on_remove_clicked)
        self._restock_button.clicked.connect(self._on_restock_clicked)
        self._purchase_button.clicked.connect(self._on_purchase_clicked)

    def refresh_product_table(self) -> None:
        """Reconstruye la tabla desde el manager."""
        rows = self._controller.refresh_rows()
        if rows is None:
            return
        self._populate_table(rows)

    def _populate_table(self, rows: list[ProductRow]) -> None:
        self._table.clearSelection()
        self._table.setRowCount(len(rows))
        for row_index, row in enumerate(rows):
            for column_index, value in enumerate(row.cells()):
                item = QTableWidgetItem(value)
                if column_index >= 3:
                    item.setTextAlignment(
                        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
                    )
                self._table.setItem(row_index, column_index, item)

    def _on_add_clicked(self, _checked: bool = False) -> None:
        """Envia el formulario de alta."""
        request = AddProductRequest(
            product_type=self._type_input.currentText(),
            name=self._name_input.text(),
            quantity=self._quantity_input.text(),
            price=self._price_input.text(),
        )
        result = self._controller.dispatch(Command.ADD, request)
        if result.ok:
            self._clear_form()
        self._notify(result)

    def _on_remove_clicked(self, _checked: bool = False) -> None:
        """Elimina la fila seleccionada."""
        request = RemoveProductRequest(product_id=self._selected_product_id())
        self._notify(self._controller.dispatch(Command.REMOVE, request))

    def _on_restock_clicked(self, _checked: bool = False) -> None:
        """Pide cantidad y repone stock de la fila seleccionada."""
        product_id = self._selected_product_id()
        if product_id is None:
            return

        quantity = prompt_text(self, "Restock", "Enter quantity to restock:")
        request = StockChangeRequest(product_id=product_id, quantity=quantity)
        self._notify(self._controller.dispatch(Command.RESTOCK, request))

    def _on_purchase_clicked(self, _checked: bool = False) -> None:
        """Pide cantidad y descuenta stock de la fila seleccionada."""
        product_id = self._selected_product_id()
        if product_id is None:
            return

        quantity = prompt_text(self, "Purchase", "Enter quantity to purchase:")
        request = StockChangeRequest(product_id=product_id, quantity=quantity)
        self._notify(self._controller.dispatch(Command.PURCHASE, request))

    def _notify(self, result: ActionResult) -> None:
        """Refresca la tabla y muestra el mensaje que corresponda."""
        if result.status is ActionStatus.IGNORED:
            return

        if result.status is ActionStatus.ERROR:
            show_error(self, "Error", result.message)
            return

        self.refresh_product_table()
        show_info(self, "Success", result.message)

    def _selected_product_id(self) -> str | None:
        """ID de la fila seleccionada o None."""
        selected_rows = self._table.selectionModel().selectedRows()
        if not selected_rows:
            return None

        item = self._table.item(selected_rows[0].row(), 0)
        return item.text() if item is not None else None

    def _clear_form(self) -> None:
        self._type_input.setCurrentIndex(0)
        self._name_input.clear()
        self._quantity_input.clear()
        self._price_input.clear()

    @staticmethod
    def _build_label(text: str, parent: QWidget) -> QLabel:
        label = QLabel(text, parent)
        label.setObjectName("fieldLabel")
        return label

    @staticmethod
    def _build_button(text: str, parent: QWidget) -> QPushButton:
        """Construye un boton estandar del panel."""
        button = QPushButton(text, parent)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
