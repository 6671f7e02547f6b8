# cli.py
import asyncio
import logging
import mimetypes
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich import box

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import PathCompleter, WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from shopfront.config import Settings, configure_logging
from shopfront.console import ConsoleShell
from shopfront.coordinator import Coordinator
from shopfront.gateways import OrderGateway, ProductGateway
from shopfront.models import ImageFile
from shopfront.shell import NoticeSlot

logger = logging.getLogger("shopfront.cli")
console = Console()

# Custom prompt style for prompt_toolkit
custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Workflow runner with a spinner
# ---------------------------
async def run_workflow(coro):
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        transient=True,
        console=console,
    ) as progress:
        progress.add_task(description="Processing...", total=None)
        await coro


def create_header(settings: Settings):
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Shopfront",
        f"[dim]{settings.product_url} | {settings.order_url}[/dim]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


class Menu:
    """Translates menu choices into coordinator workflows."""

    def __init__(self, coordinator: Coordinator, shell: ConsoleShell):
        self.coordinator = coordinator
        self.shell = shell
        self.session = PromptSession(style=custom_style)

    async def ask(self, message: str, completer=None, default: str = "") -> str:
        return (await self.session.prompt_async(f"{message} ", completer=completer, default=default)).strip()

    async def ask_product_id(self) -> str:
        completer = WordCompleter(self.coordinator.cache.ids(), ignore_case=True)
        return await self.ask("Enter product ID", completer=completer)

    async def fill_product_form(self):
        form = self.shell.product_form
        form["name"] = await self.ask("Product name", default=str(form.get("name", "")))
        form["description"] = await self.ask("Description", default=str(form.get("description", "") or ""))
        form["price"] = await self.ask("💰 Price in dollars", default=str(form.get("price", "10.00")))
        form["stock_quantity"] = await self.ask("📦 Stock quantity", default=str(form.get("stock_quantity", "1")))

    async def select_image(self, product_id: str):
        raw = await self.ask("Image file (blank for none)", completer=PathCompleter(expanduser=True))
        if not raw:
            self.shell.selected_images.pop(product_id, None)
            return
        path = Path(raw).expanduser()
        if not path.is_file():
            console.print(f"[red]No such file: {path}[/red]")
            self.shell.selected_images.pop(product_id, None)
            return
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        self.shell.selected_images[product_id] = ImageFile(
            filename=path.name, content=path.read_bytes(), content_type=content_type
        )

    async def add_to_cart(self):
        pid = await self.ask_product_id()
        product = self.coordinator.cache.get(pid)
        if product is None:
            console.print(f"[red]Product {pid} is not in the listed catalog[/red]")
            return
        self.coordinator.add_to_cart(product.product_id, product.name, product.price)

    def show_cart(self):
        self.shell.render_cart(self.coordinator.cart.items(), self.coordinator.cart.compute_total())

    async def loop(self):
        await run_workflow(self.coordinator.start())

        while True:
            status = self.shell.status_panel()
            if status is not None:
                console.print(status)

            menu_table = Table.grid(padding=(0, 2))
            menu_table.add_column("Key", style="bold cyan", width=4)
            menu_table.add_column("Option", width=30)
            menu_table.add_column("Key", style="bold cyan", width=4)
            menu_table.add_column("Option", width=30)

            options = [
                ("1", "📦 List products", "5", "🛒 Add to cart"),
                ("2", "➕ Add product", "6", "🛒 View cart"),
                ("3", "🖼️ Upload image", "7", "✅ Place order"),
                ("4", "🗑️ Delete product", "8", "📋 List orders"),
                ("", "", "q", "👋 Quit")
            ]
            for row in options:
                menu_table.add_row(*row)
            console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

            choice = await self.ask(
                "\nChoose an option",
                completer=WordCompleter([str(i) for i in range(1, 9)] + ["q", "quit", "exit"])
            )

            if choice == "1":
                await run_workflow(self.coordinator.refresh_catalog())

            elif choice == "2":
                await self.fill_product_form()
                await run_workflow(self.coordinator.create_product())

            elif choice == "3":
                pid = await self.ask_product_id()
                await self.select_image(pid)
                await run_workflow(self.coordinator.attach_image(pid))

            elif choice == "4":
                pid = await self.ask_product_id()
                if (await self.ask(f"Delete product {pid}? [y/N]")).lower() in ("y", "yes"):
                    await run_workflow(self.coordinator.delete_product(pid))

            elif choice == "5":
                await self.add_to_cart()

            elif choice == "6":
                self.show_cart()

            elif choice == "7":
                await run_workflow(self.coordinator.place_order())

            elif choice == "8":
                await run_workflow(self.coordinator.refresh_orders())

            elif choice.lower() in ("q", "quit", "exit"):
                console.print(Panel.fit("[bold green]Thank you for shopping! 👋[/bold green]", title="Goodbye"))
                return

            console.print()
            console.rule(style="dim")


async def main(settings: Optional[Settings] = None):
    settings = settings or Settings.from_env()
    shell = ConsoleShell(console=console, notices=NoticeSlot(ttl=settings.notice_ttl))
    async with ProductGateway(settings.product_url, timeout=settings.timeout) as products, \
            OrderGateway(settings.order_url, timeout=settings.timeout) as orders:
        coordinator = Coordinator(products, orders, shell)
        console.clear()
        console.print(create_header(settings))
        await Menu(coordinator, shell).loop()


if __name__ == "__main__":
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    try:
        asyncio.run(main(settings))
    except (KeyboardInterrupt, EOFError):
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        logger.exception("unexpected error")
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)
