"""CLI interface using Typer + Rich."""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from bargainwala.core.models import AddResult, BargainItem, NegotiationStatus
from bargainwala.core.negotiation import SETTLEMENT_DELAY_SECONDS
from bargainwala.core.orchestrator import ShoppingSession
from bargainwala.core.scanner import registry
from bargainwala.db.seed import seed as seed_db
from bargainwala.db.session import init_db

app = typer.Typer(help="Bargain Wala: scan, quote and bargain for your groceries")
console = Console()

STATUS_STYLE = {
    NegotiationStatus.PENDING: "blue",
    NegotiationStatus.NEGOTIATING: "yellow",
    NegotiationStatus.AGREED: "green",
    NegotiationStatus.FAILED: "red",
}


def _status_text(item: BargainItem) -> str:
    if item.status == NegotiationStatus.AGREED:
        text = "Price Agreed!"
        if item.savings > 0:
            text += f" You saved ${item.savings:.2f}!"
        return text
    if item.status == NegotiationStatus.NEGOTIATING:
        return "Negotiating..."
    if item.status == NegotiationStatus.FAILED:
        return "Offer Rejected"
    return f"Server Countered: ${item.server_counter_price:.2f}"


def _print_update(item: BargainItem) -> None:
    style = STATUS_STYLE[item.status]
    console.print(f"[{style}]{item.product_name}: {_status_text(item)}[/{style}]")


def _print_cart(session: ShoppingSession) -> None:
    summary = session.cart_summary()
    console.print(
        Panel(
            f"[bold yellow]Your Bargain Coins: {summary['coins_earned']:.2f}[/bold yellow]",
            border_style="yellow",
        )
    )
    if not summary["items"]:
        console.print("[dim]Your cart is empty. Scan an item to start bargaining![/dim]")
        return

    table = Table(title="Saved Cart")
    table.add_column("Product")
    table.add_column("Your Quote", justify="right")
    table.add_column("Retail Price", justify="right")
    table.add_column("Status")
    for item in summary["items"]:
        style = STATUS_STYLE[item.status]
        table.add_row(
            item.product_name,
            f"${item.user_quoted_price:.2f}",
            f"${item.retail_price:.2f}",
            f"[{style}]{_status_text(item)}[/{style}]",
        )
    console.print(table)
    console.print(
        f"[bold]Total Best Price:[/bold] ${summary['best_quoted_price_total']:.2f}"
    )


async def _ask_quote(session: ShoppingSession, product) -> bool:
    """Prompt until the product is quoted or skipped; False once input ends."""
    console.print(
        f"\n[bold]{product.name}[/bold] | Retail Price: ${product.retail_price:.2f}"
    )
    while True:
        try:
            # Prompt in a thread so settlements keep firing while we wait.
            text = await asyncio.to_thread(
                Prompt.ask, "Your Price ($), blank to skip", default=""
            )
        except (KeyboardInterrupt, EOFError):
            console.print("\n[dim]No more quotes.[/dim]")
            return False

        if not text.strip():
            return True
        try:
            result, _ = session.submit_quote(product, text)
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            continue
        if result == AddResult.REJECTED_DUPLICATE:
            console.print(f"[yellow]{product.name} is already in your cart.[/yellow]")
        else:
            console.print(f"[green]{product.name} added to cart![/green]")
        return True


async def _shop(session: ShoppingSession, bag: str) -> None:
    products = session.scan_bag(bag)
    console.print(f"[green]Scan complete! Found {len(products)} items.[/green]")
    session.store.subscribe(_print_update)

    for product in products:
        if not await _ask_quote(session, product):
            break

    if session.store.pending_settlements:
        with console.status("[bold yellow]Negotiating...[/bold yellow]"):
            await session.wait_for_settlements()

    session.store.unsubscribe(_print_update)
    console.print()
    _print_cart(session)


@app.command()
def shop(
    bag: str = typer.Option("default", help="Bag to scan"),
    delay: float = typer.Option(
        SETTLEMENT_DELAY_SECONDS, help="Seconds before the server answers an offer"
    ),
):
    """Scan a bag, quote your prices and watch the negotiation."""
    console.print(Panel("[bold green]Bargain Wala[/bold green]", title="Welcome"))
    session = ShoppingSession(settlement_delay=delay)
    try:
        asyncio.run(_shop(session, bag))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    finally:
        session.close()


@app.command()
def bags():
    """List the bags that can be scanned."""
    table = Table(title="Scannable Bags")
    table.add_column("Bag")
    table.add_column("Label")
    table.add_column("Items", justify="right")
    for bag in registry.list_bags():
        table.add_row(bag.bag_id, bag.label, str(len(bag.products)))
    console.print(table)


@app.command()
def seed():
    """Populate the catalog, delivery slots and delivery."""
    init_db()
    count = seed_db()
    if count:
        console.print(f"[green]{count} rows inserted successfully![/green]")
    else:
        console.print("[yellow]Database already contains data. Nothing inserted.[/yellow]")


@app.command()
def products(search: str = typer.Option("", help="Filter products by name")):
    """List recommended products."""
    session = ShoppingSession()
    try:
        found = session.search_products(search)
        if not found:
            console.print("[dim]No products found.[/dim]")
            return
        table = Table(title="Recommended for You")
        table.add_column("ID", justify="right")
        table.add_column("Product")
        table.add_column("Price", justify="right")
        for p in found:
            table.add_row(str(p["id"]), p["name"], f"${p['price']:.2f}")
        console.print(table)
    finally:
        session.close()


@app.command()
def product(product_id: int = typer.Argument(..., help="Product ID")):
    """Show a product's details."""
    session = ShoppingSession()
    try:
        detail = session.product_detail(product_id)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    finally:
        session.close()

    console.print(
        Panel(
            f"[bold cyan]${detail['price']:.2f}[/bold cyan]\n\n{detail['description']}",
            title=f"[bold]{detail['name']}[/bold]",
        )
    )


@app.command(name="request-item")
def request_item(text: str = typer.Argument(..., help="What should we stock next time?")):
    """Request an item for next time."""
    session = ShoppingSession()
    try:
        session.request_item(text)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    finally:
        session.close()
    console.print(f"[green]Request for '{text.strip()}' submitted![/green]")


@app.command(name="requests")
def list_requests():
    """List items shoppers asked us to stock."""
    session = ShoppingSession()
    try:
        requests = session.item_requests()
        if not requests:
            console.print("[dim]No item requests yet.[/dim]")
            return
        for r in requests:
            console.print(f"[bold]{r.text}[/bold] | Requested: {r.created_at:%Y-%m-%d %H:%M}")
    finally:
        session.close()


def _print_delivery(delivery) -> None:
    titles = {
        "pending": ("Confirm Your Delivery", "blue"),
        "confirmed": ("Delivery Confirmed!", "green"),
        "rescheduled": ("Delivery Rescheduled", "orange3"),
    }
    title, style = titles[delivery.status]
    console.print(
        Panel(
            f"Delivery Time: {delivery.delivery_time}",
            title=f"[bold {style}]{title}[/bold {style}]",
            border_style=style,
        )
    )


@app.command()
def slots():
    """Show the delivery status and the slots available for rescheduling."""
    session = ShoppingSession()
    try:
        overview = session.delivery_overview()
        if not overview["delivery"]:
            console.print("[yellow]No delivery booked. Run 'bargainwala seed' first.[/yellow]")
            return
        _print_delivery(overview["delivery"])

        table = Table(title="Available Slots for Reschedule")
        table.add_column("ID", justify="right")
        table.add_column("Time")
        table.add_column("Available")
        for slot in overview["slots"]:
            if slot.is_booked:
                table.add_row(str(slot.id), f"[strike dim]{slot.time}[/strike dim]", "[red]no[/red]")
            else:
                table.add_row(str(slot.id), slot.time, "[green]yes[/green]")
        console.print(table)
    finally:
        session.close()


@app.command(name="confirm-delivery")
def confirm_delivery():
    """Confirm the proposed delivery time."""
    session = ShoppingSession()
    try:
        _print_delivery(session.confirm_delivery())
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    finally:
        session.close()


@app.command()
def reschedule(slot_id: int = typer.Argument(..., help="Slot ID from 'slots'")):
    """Move the delivery to another free slot."""
    session = ShoppingSession()
    try:
        _print_delivery(session.reschedule_delivery(slot_id))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    finally:
        session.close()


if __name__ == "__main__":
    app()
