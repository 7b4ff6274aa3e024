# cli.py - interactive product catalog client
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

import requests

from sdk.pystore import ProductClient

console = Console()
c = ProductClient(
    base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
    api_key=os.getenv("API_KEY") or None,
)

# Global state for status messages and caching
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("In stock", justify="center", width=8)

    for p in products:
        in_stock = "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]"
        table.add_row(
            str(p.get("id", "N/A")),
            p.get("name", "N/A"),
            p.get("description", ""),
            f"${float(p.get('price', 0)):.2f}",
            p.get("category", "N/A"),
            in_stock,
        )
    console.print(table)


def show_page(page: Dict[str, Any]):
    title = f"📦 Products - page {page.get('page')} (limit {page.get('limit')}, total {page.get('total')})"
    show_products(page.get("products", []), title=title)


def show_stats(stats: Dict[str, int]):
    if not stats:
        console.print("[italic yellow]No products in the catalog[/italic yellow]")
        return
    table = Table(title="📊 Products per category", box=box.ROUNDED, header_style="bold yellow")
    table.add_column("Category", width=20)
    table.add_column("Count", justify="right", width=8)
    for category, count in sorted(stats.items()):
        table.add_row(category, str(count))
    console.print(table)


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


def _error_message(e: Exception) -> str:
    # Server errors carry {"error": "..."}
    if isinstance(e, requests.HTTPError) and e.response is not None:
        try:
            return f"HTTP {e.response.status_code}: {e.response.json().get('error', e.response.text)}"
        except ValueError:
            return f"HTTP {e.response.status_code}: {e.response.text}"
    return str(e)


# ---------------------------
# API wrapper with exception handling
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except (requests.RequestException, ValueError) as e:
        status_message = f"Error: {_error_message(e)}"
        console.print(show_status(status_message, False))
        return None


def refresh_cache():
    global product_cache
    page = try_api(c.list_products, limit=1000)
    product_cache = page.get("products", []) if page else []


# ---------------------------
# Autocompletion helpers
# ---------------------------
def get_product_completer():
    if not product_cache:
        refresh_cache()
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_category_completer():
    categories = {p.get("category", "") for p in product_cache}
    return WordCompleter(sorted(cat for cat in categories if cat), ignore_case=True)


def ask_product_id() -> str:
    return prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product API",
        "[bold blue]Catalog CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


# ---------------------------
# Input helpers with autocomplete
# ---------------------------
def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: Optional[float] = 10.0) -> Optional[float]:
    # Blank input returns None when there is no default
    while True:
        raw = Prompt.ask(message, default="" if default is None else str(default))
        if raw == "" and default is None:
            return None
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(partial: bool = False) -> Dict[str, Any]:
    hint = " (blank to keep)" if partial else ""
    fields: Dict[str, Any] = {
        "name": prompt_with_autocomplete(f"🏷️ Name{hint}").strip(),
        "description": prompt_with_autocomplete(f"📝 Description{hint}").strip(),
        "price": ask_float(f"💰 Price{hint}", default=None if partial else 10.0),
        "category": prompt_with_autocomplete(f"📂 Category{hint}", completer=get_category_completer()).strip(),
    }
    if partial:
        fields = {k: v for k, v in fields.items() if v not in ("", None)}
        if Confirm.ask("Change stock status?", default=False):
            fields["in_stock"] = Confirm.ask("In stock?", default=True)
    else:
        fields["in_stock"] = Confirm.ask("In stock?", default=True)
    return fields


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())

    # Preload products for autocomplete
    refresh_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "➕ Create product"),
            ("2", "🔍 Search products", "6", "✏️ Update product"),
            ("3", "📊 Category stats", "7", "🗑️ Delete product"),
            ("4", "ℹ️ Get product by ID", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer()).strip()
            page = Prompt.ask("Page", default="1")
            limit = Prompt.ask("Limit", default="10")
            resp = try_api(c.list_products, category or None, page, limit, success_msg="Products loaded successfully")
            if resp is not None:
                show_page(resp)

        elif choice == "2":
            term = prompt_with_autocomplete("Enter search term")
            resp = try_api(c.search_products, term, success_msg=f"Search for '{term}' completed")
            if resp is not None:
                show_products(resp.get("products", []), title=f"🔍 {resp.get('total', 0)} match(es)")

        elif choice == "3":
            resp = try_api(c.get_stats, success_msg="Stats loaded")
            if resp is not None:
                show_stats(resp.get("stats", {}))

        elif choice == "4":
            pid = ask_product_id()
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "5":
            fields = ask_product_fields()
            resp = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                refresh_cache()

        elif choice == "6":
            pid = ask_product_id()
            fields = ask_product_fields(partial=True)
            resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
            if resp:
                show_products([resp])
                refresh_cache()

        elif choice == "7":
            pid = ask_product_id()
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                refresh_cache()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
