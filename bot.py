"""
Telegram Bot — the user-facing interface.

Connects Telegram to the orchestrator for weather searches and
search history. Also serves the JSON dashboard.

Usage:
  python bot.py
"""

import logging
import threading

from telegram import Update
from telegram.ext import (
    ApplicationBuilder,
    CommandHandler,
    MessageHandler,
    filters,
    ContextTypes,
)

from config import TELEGRAM_BOT_TOKEN, OWNER_CHAT_ID
from formatting import (
    format_history,
    format_snapshot,
    parse_history_number,
    parse_location_text,
)
from orchestrator import Orchestrator

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    level=logging.INFO,
)
log = logging.getLogger("bot")

orchestrator = Orchestrator()


# ── Auth ────────────────────────────────────────────────────────

def owner_only(func):
    """Restrict to OWNER_CHAT_ID. Set to 0 in .env to allow everyone."""
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE):
        if OWNER_CHAT_ID and update.effective_chat.id != OWNER_CHAT_ID:
            await update.message.reply_text("Not authorized.")
            return
        return await func(update, context)
    return wrapper


# ── Helpers ─────────────────────────────────────────────────────

async def _reply_with_result(update: Update, result):
    if not result.ok:
        await update.message.reply_text(result.error_message)
        return
    await update.message.reply_text(format_snapshot(result.location, result.snapshot))


def _history_index(context: ContextTypes.DEFAULT_TYPE):
    if not context.args:
        return None
    return parse_history_number(context.args[0])


# ── Command handlers ────────────────────────────────────────────

@owner_only
async def cmd_start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Weather bot online. Commands:\n\n"
        "/weather <city> [country]  — current weather\n"
        "/history  — past searches\n"
        "/replay <n>  — search history entry n again\n"
        "/delete <n>  — delete history entry n\n"
        "/clear  — clear the current result\n"
        "/help  — show this message\n\n"
        "Or just send a city name, e.g. \"London, GB\"."
    )


@owner_only
async def cmd_weather(update: Update, context: ContextTypes.DEFAULT_TYPE):
    location = parse_location_text(" ".join(context.args or []))
    await _reply_with_result(update, await orchestrator.search(location))


@owner_only
async def cmd_history(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(format_history(orchestrator.state().history))


@owner_only
async def cmd_replay(update: Update, context: ContextTypes.DEFAULT_TYPE):
    index = _history_index(context)
    entry = orchestrator.history_entry(index) if index is not None else None
    if not entry:
        await update.message.reply_text("Usage: /replay <n>  (see /history)")
        return
    await _reply_with_result(update, await orchestrator.search_from_history(entry))


@owner_only
async def cmd_delete(update: Update, context: ContextTypes.DEFAULT_TYPE):
    index = _history_index(context)
    if index is None:
        await update.message.reply_text("Usage: /delete <n>  (see /history)")
        return
    state = orchestrator.delete_history(index)
    await update.message.reply_text(format_history(state.history))


@owner_only
async def cmd_clear(update: Update, context: ContextTypes.DEFAULT_TYPE):
    orchestrator.clear()
    await update.message.reply_text("Cleared.")


@owner_only
async def cmd_help(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await cmd_start(update, context)


@owner_only
async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Treat plain text as a location to search."""
    text = update.message.text
    if not text:
        return
    await _reply_with_result(update, await orchestrator.search(parse_location_text(text)))


# ── Main ────────────────────────────────────────────────────────

def start_dashboard_in_thread():
    """Run the Flask dashboard in a background thread."""
    try:
        from dashboard import create_app
        app = create_app(orchestrator)
        # Suppress Flask request logs in the main console
        flask_log = logging.getLogger("werkzeug")
        flask_log.setLevel(logging.WARNING)
        from config import DASHBOARD_HOST, DASHBOARD_PORT
        log.info(f"Dashboard: http://{DASHBOARD_HOST}:{DASHBOARD_PORT}")
        app.run(host=DASHBOARD_HOST, port=DASHBOARD_PORT, use_reloader=False)
    except Exception as e:
        log.error(f"Dashboard failed to start: {e}")


def main():
    if not TELEGRAM_BOT_TOKEN:
        raise SystemExit("TELEGRAM_BOT_TOKEN is not set")

    # Start dashboard in background thread
    dash_thread = threading.Thread(target=start_dashboard_in_thread, daemon=True)
    dash_thread.start()

    app = ApplicationBuilder().token(TELEGRAM_BOT_TOKEN).build()

    app.add_handler(CommandHandler("start", cmd_start))
    app.add_handler(CommandHandler("help", cmd_help))
    app.add_handler(CommandHandler("weather", cmd_weather))
    app.add_handler(CommandHandler("history", cmd_history))
    app.add_handler(CommandHandler("replay", cmd_replay))
    app.add_handler(CommandHandler("delete", cmd_delete))
    app.add_handler(CommandHandler("clear", cmd_clear))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    log.info("Bot starting (Telegram polling)...")
    app.run_polling()


if __name__ == "__main__":
    main()
