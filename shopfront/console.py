# shopfront/console.py
from decimal import Decimal
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shopfront.models import CartLineItem, ImageFile, Order, Product
from shopfront.shell import ERROR, INFO, SUCCESS, NoticeSlot

SEVERITY_STYLES = {INFO: "cyan", SUCCESS: "green", ERROR: "red"}


def format_currency(amount) -> str:
    return f"${Decimal(str(amount)):.2f}"


class ConsoleShell:
    """Rich based presentation shell.

    Rendering goes straight to the console. The product form and the selected
    images are plain state: the CLI fills them in, the workflows read them.
    """

    def __init__(self, console: Optional[Console] = None, notices: Optional[NoticeSlot] = None):
        self.console = console or Console()
        self.notices = notices or NoticeSlot()
        self.product_form: Dict[str, Any] = {}
        self.selected_images: Dict[str, ImageFile] = {}

    # ---------------------------
    # Display helpers
    # ---------------------------
    def render_products(self, products: List[Product]) -> None:
        if not products:
            self.console.print("[italic yellow]No products available yet. Add some above![/italic yellow]")
            return

        table = Table(
            title="📦 Products Catalog",
            box=box.ROUNDED,
            header_style="bold cyan",
            title_style="bold magenta",
            show_lines=True
        )
        table.add_column("ID", style="dim", width=12)
        table.add_column("Name", style="bold", width=20)
        table.add_column("Description", width=24)
        table.add_column("Price", justify="right", width=10)
        table.add_column("Stock", justify="right", width=8)
        table.add_column("Image", width=10)
        table.add_column("Updated", style="dim", width=19)

        for p in products:
            table.add_row(
                p.product_id,
                p.name,
                p.description or "No description available.",
                format_currency(p.price),
                str(p.stock_quantity),
                "yes" if p.image_url else "-",
                p.updated_at.strftime("%Y-%m-%d %H:%M:%S") if p.updated_at else "-",
            )
        self.console.print(table)

    def render_orders(self, orders: List[Order]) -> None:
        if not orders:
            self.console.print("[italic yellow]No orders yet.[/italic yellow]")
            return

        table = Table(
            title="📋 Orders",
            box=box.ROUNDED,
            header_style="bold yellow",
            title_style="bold yellow",
            show_lines=True
        )
        table.add_column("Order ID", style="dim", width=14)
        table.add_column("User ID", width=12)
        table.add_column("Status", width=12)
        table.add_column("Total", justify="right", width=12)
        table.add_column("Items", justify="right", width=8)

        for order in orders:
            status_style = "green" if (order.status or "").lower() in ("placed", "completed", "confirmed") else "yellow"
            table.add_row(
                order.order_id,
                order.user_id or "-",
                f"[{status_style}]{order.status or 'N/A'}[/{status_style}]",
                format_currency(order.total_amount),
                str(sum(it.quantity for it in order.items)),
            )
        self.console.print(table)

    def render_cart(self, items: List[CartLineItem], total: Decimal) -> None:
        title = Text()
        title.append("🛒 Shopping Cart", style="bold")
        title.append(f" - Total: {format_currency(total)}", style="bold green")

        if not items:
            self.console.print(Panel("Your cart is empty.", title=title, style="blue"))
            return

        table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
        table.add_column("Product", style="bold", width=30)
        table.add_column("Qty", justify="right", width=8)
        table.add_column("Price", justify="right", width=12)
        table.add_column("Subtotal", justify="right", width=12)

        for it in items:
            table.add_row(it.name, str(it.quantity), format_currency(it.unit_price), format_currency(it.line_total))
        self.console.print(Panel(table, title=title, border_style="blue"))

    def products_placeholder(self, text: str) -> None:
        self.console.print(f"[dim]{text}[/dim]")

    def orders_placeholder(self, text: str) -> None:
        self.console.print(f"[dim]{text}[/dim]")

    def notify(self, message: str, severity: str = INFO) -> None:
        self.notices.post(message, severity)
        panel = self.status_panel()
        if panel is not None:
            self.console.print(panel)

    def status_panel(self) -> Optional[Panel]:
        notice = self.notices.current()
        if notice is None:
            return None
        style = SEVERITY_STYLES.get(notice.severity, "white")
        return Panel.fit(Text(notice.message, style=style), title="Status")

    # ---------------------------
    # Input accessors
    # ---------------------------
    def read_product_form(self) -> Dict[str, Any]:
        return dict(self.product_form)

    def reset_product_form(self) -> None:
        self.product_form = {}

    def selected_image(self, product_id: str) -> Optional[ImageFile]:
        return self.selected_images.get(str(product_id))
