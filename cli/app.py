# cli/app.py
# CLI = the terminal host. It only drives core; no pricing happens here.

from __future__ import annotations

from typing import Optional

from core import rates
from core.calculator import compute_live_quote
from core.config import settings, setup_logging
from core.feedback import Feedback
from core.messages import (
    format_currency,
    format_currency_int,
    format_percent,
    format_single_message,
)
from core.models import QuoteBreakdown, QuoteRequest
from core.session import QuoteSession

from .feedback import TerminalFeedback


# ---------- INPUT HELPERS ----------

def ask_int_default(prompt: str, default: int, *, min_value: int | None = None, max_value: int | None = None) -> int:
    """Whole number with a default: Enter -> default. Re-prompts on garbage."""
    while True:
        raw = input(f"{prompt} [{default}]: ").strip()
        if raw == "":
            return default
        try:
            value = int(float(raw.replace(",", ".")))
        except (ValueError, OverflowError):
            print("❌ Enter a whole number or press Enter")
            continue
        if min_value is not None and value < min_value:
            print(f"❌ Value must be >= {min_value}")
            continue
        if max_value is not None and value > max_value:
            print(f"❌ Value must be <= {max_value}")
            continue
        return value


def ask_float_default(prompt: str, default: float, *, min_value: float | None = None) -> float:
    """Number with a default: Enter -> default."""
    while True:
        raw = input(f"{prompt} [{default}]: ").strip()
        if raw == "":
            value = float(default)
        else:
            raw = raw.replace(",", ".")
            try:
                value = float(raw)
            except ValueError:
                print("❌ Enter a number or press Enter")
                continue

        if min_value is not None and value < min_value:
            print(f"❌ Value must be >= {min_value}")
            continue
        return value


def ask_choice(prompt: str, options: dict[str, str], default: str) -> str:
    """Pick a key from options by key or by its 1-based position."""
    keys = list(options)
    for i, k in enumerate(keys, start=1):
        print(f" {i}. {options[k]} ({k})")
    while True:
        raw = input(f"{prompt} [{default}]: ").strip().lower()
        if raw == "":
            return default
        if raw in options:
            return raw
        if raw.isdigit() and 1 <= int(raw) <= len(keys):
            return keys[int(raw) - 1]
        print("❌ Unknown option")


def ask_yes_no(prompt: str) -> bool:
    while True:
        raw = input(prompt + " (y/n): ").strip().lower()
        if raw in ("y", "yes", "s", "si", "sí"):
            return True
        if raw in ("n", "no"):
            return False
        print("❌ Enter y or n")


# ---------- OUTPUT ----------

def print_breakdown(b: QuoteBreakdown) -> None:
    print("\n--- Breakdown ---")
    print(f"Size:                  {b.size} cm ({b.stickers_per_sheet} per sheet)")
    print(f"Quantity:              {b.quantity}")
    print(f"Finish:                {b.finish_label}")
    print(f"Sheets needed:         {b.sheets_needed} x {format_currency(b.cost_per_sheet)}")
    print(f"Vinyl:                 {format_currency(b.vinyl_cost)}")
    for line in b.fixed_costs:
        print(f"  {line.label + ':':<20} {format_currency(line.amount)}")
    print(f"Fixed costs:           {format_currency(b.fixed_total)}")
    print(f"Ink / cut / tape:      {format_currency(b.variable_costs.total)}")
    print(f"Packaging:             {format_currency(b.packaging)}")
    print(f"Shipping:              {format_currency(b.shipping)}")
    print(f"Operating cost:        {format_currency(b.operating_cost)}")
    print(f"Margin ({format_percent(b.margin_rate)}):           {format_currency(b.profit)}")
    print(f"Subtotal:              {format_currency(b.subtotal)}")
    print(f"IVA ({format_percent(rates.IVA_RATE)}):             {format_currency(b.iva)}")
    print(f"TOTAL:                 {format_currency_int(b.total_rounded)}")
    print(f"Per sticker:           {format_currency(b.price_per_sticker)}")
    print(
        f"Split (margin + IVA):  {format_currency(b.split.part_a)} / {format_currency(b.split.part_b)}"
    )
    print("-----------------\n")


def print_saved(session: QuoteSession) -> None:
    if not session.quotes:
        print("\n(no saved quotes)\n")
        return
    print("\n--- Saved quotes ---")
    for q in session.quotes:
        client = f" [{q.client_name}]" if q.client_name else ""
        print(
            f"#{q.id}{client} {q.size} cm · {q.quantity} · {q.finish_label} "
            f"— {format_currency_int(q.total_with_included_rounded)} "
            f"(no shipping {format_currency_int(q.total_no_shipping_rounded)})"
        )
    split = session.combined_split()
    print(f"Shipping:              {format_currency(session.shipping)}")
    print(f"Remaining shipping:    {format_currency(session.remaining_shipping())}")
    print(f"Combined total:        {format_currency_int(session.combined_total())}")
    print(f"Split (margin + IVA):  {format_currency(split.part_a)} / {format_currency(split.part_b)}")
    print("--------------------\n")


# ---------- MAIN LOOP ----------

MENU = """
 1) Edit quote         5) Single message
 2) Save quote         6) Multi message
 3) Saved quotes       7) Copy last message
 4) Remove quote       8) Reset inputs
 9) Clear saved        0) Quit
"""


def default_request() -> QuoteRequest:
    return QuoteRequest(
        size=settings.DEFAULT_SIZE,
        quantity=settings.DEFAULT_QUANTITY,
        finish=settings.DEFAULT_FINISH,
        shipping=settings.DEFAULT_SHIPPING,
    )


def edit_request(req: QuoteRequest) -> QuoteRequest:
    size = ask_int_default("Size (cm)", req.size, min_value=rates.MIN_SIZE_CM, max_value=rates.MAX_SIZE_CM)
    quantity = ask_int_default("Quantity", req.quantity, min_value=0)
    print("\nFinishes:")
    finish = ask_choice("Finish", dict(rates.FINISH_LABELS), req.finish)
    shipping = ask_float_default("Shipping ($)", req.shipping, min_value=0)
    return QuoteRequest(size=size, quantity=quantity, finish=finish, shipping=shipping)


def run_cli(session: Optional[QuoteSession] = None, feedback: Optional[Feedback] = None) -> None:
    print("\n=== Sticker Quote Builder (CLI) ===\n")

    if session is None:
        session = QuoteSession(shipping=settings.DEFAULT_SHIPPING)
    if feedback is None:
        feedback = TerminalFeedback()

    client_name = input("Client name (optional): ").strip()
    req = default_request()
    last_text = ""

    while True:
        b = compute_live_quote(req.quantity, req.size, req.finish, req.shipping)
        print(
            f"\nCurrent: {b.size} cm · {b.quantity} · {b.finish_label} · "
            f"shipping {format_currency(b.shipping)} → {format_currency_int(b.total_rounded)}"
        )
        print(MENU)
        choice = input("> ").strip()

        if choice == "1":
            client_name = input(f"Client name [{client_name}]: ").strip() or client_name
            req = edit_request(req)
            session.set_shipping(req.shipping)
            print_breakdown(compute_live_quote(req.quantity, req.size, req.finish, req.shipping))
        elif choice == "2":
            q = session.save_quote(client_name, req.size, req.quantity, req.finish, req.shipping)
            feedback.tap()
            print(f"✅ Saved #{q.id}: {format_currency_int(q.total_with_included_rounded)}")
        elif choice == "3":
            print_saved(session)
        elif choice == "4":
            quote_id = ask_int_default("Quote id to remove", 0, min_value=0)
            if session.remove_quote(quote_id):
                feedback.tap()
                print(f"🗑️  Removed #{quote_id}")
            else:
                print(f"❌ No saved quote #{quote_id}")
        elif choice == "5":
            last_text = format_single_message(b.size, b.quantity, b.finish_label, b.total_rounded, b.shipping)
            print("\n" + last_text + "\n")
        elif choice == "6":
            last_text = session.multi_message()
            print("\n" + last_text + "\n")
        elif choice == "7":
            if not last_text:
                print("❌ Build a message first")
            elif feedback.copy(last_text):
                feedback.tap()
                print("✅ Copied")
        elif choice == "8":
            client_name = ""
            req = default_request()
            session.set_shipping(req.shipping)
        elif choice == "9":
            if ask_yes_no("Remove every saved quote?"):
                session.clear()
        elif choice == "0":
            return
        else:
            print("❌ Unknown option")


def main() -> None:
    setup_logging()
    try:
        run_cli()
    except (KeyboardInterrupt, EOFError):
        print()


if __name__ == "__main__":
    main()
