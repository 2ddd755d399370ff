"""
Cosmic Cycles — command line.
Validates user input, runs the engine and renders readings with rich.

Run:
    python main.py biorhythm --birth 1990-01-01 --days 7
    python main.py lunar --calendar 2024-02
    python main.py numerology --name "Ada Lovelace" --birth 1990-12-10
    python main.py tarot --user ada
    python main.py signs leo aries
    python main.py signs --daily leo
    python main.py digest --watch
"""
import argparse
import os
import sys
from datetime import date, datetime, time, timezone

from apscheduler.schedulers.blocking import BlockingScheduler
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

import config
from core import compatibility, content, cycle_engine, lunar, numerology, period, seed
from core.validation import (
    validate_date,
    validate_month,
    validate_name,
    validate_range_length,
    validate_sign,
    validate_target_date,
)

console = Console()

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _today() -> date:
    return datetime.now(timezone.utc).date()


def _reject(error: str) -> int:
    logger.warning(f"Rejected input: {error}")
    console.print(f"[bold red]Invalid input:[/bold red] {error}")
    return EXIT_INVALID_INPUT


def _value_color(value: float) -> str:
    if cycle_engine.is_critical(value):
        return "yellow"
    return "green" if value >= 0 else "red"


def _signed(value: float) -> str:
    color = _value_color(value)
    return f"[{color}]{value:+.2f}[/{color}]"


# ── Biorhythm ──────────────────────────────────────────────────────────────────

def display_biorhythm_day(day):
    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Cycle", style="dim")
    table.add_column("Value", style="bold", justify="right")
    table.add_column("Advice")

    for cycle_id in config.BIORHYTHM_CATEGORIES:
        value = day.value(cycle_id)
        table.add_row(
            content.cycle_name(cycle_id),
            _signed(value),
            content.cycle_advice(cycle_id, value, cycle_id in day.critical_cycles),
        )
    table.add_row("Average", _signed(day.average), "")

    title = f"[bold]Biorhythm — {day.date.isoformat()}[/bold]"
    if day.triple_critical:
        title += "  [bold red]TRIPLE CRITICAL[/bold red]"
    elif day.critical_day:
        title += "  [yellow]critical day[/yellow]"

    console.print(Panel(
        table,
        title=title,
        subtitle=content.general_advice(day.advice_key),
        border_style="cyan",
        expand=False,
    ))


def display_period(summary):
    table = Table(box=box.SIMPLE, padding=(0, 1))
    table.add_column("Date", style="dim")
    for cycle_id in config.BIORHYTHM_CATEGORIES:
        table.add_column(content.cycle_name(cycle_id), justify="right")
    table.add_column("Avg", justify="right")
    table.add_column("Critical")

    for day in summary.days:
        table.add_row(
            day.date.isoformat(),
            *(_signed(day.value(c)) for c in config.BIORHYTHM_CATEGORIES),
            _signed(day.average),
            ", ".join(day.critical_cycles),
        )

    console.print(table)

    info = Table(box=box.SIMPLE, show_header=False, padding=(0, 1))
    info.add_column("k", style="dim")
    info.add_column("v", style="bold")
    for category, best in summary.best_date_per_category.items():
        average = summary.average_per_category.get(category)
        suffix = f"  (avg {average:+.2f})" if average is not None else ""
        info.add_row(f"Best {content.cycle_name(category).lower()}", best.isoformat() + suffix)
    info.add_row("Critical days", str(summary.critical_day_count))
    console.print(Panel(info, title="[bold]Period summary[/bold]", border_style="cyan", expand=False))


def display_critical_days(critical_days, start, number_of_days):
    table = Table(box=box.ROUNDED, padding=(0, 1))
    table.add_column("Date", style="dim")
    table.add_column("Cycles")
    table.add_column("Severity")

    for info in critical_days:
        color = {"high": "bold red", "medium": "yellow"}.get(info.severity, "white")
        table.add_row(
            info.date.isoformat(),
            ", ".join(content.cycle_name(c) for c in info.critical_cycles),
            f"[{color}]{content.severity_label(info.severity)}[/{color}]",
        )

    console.print(Panel(
        table,
        title=f"[bold]Critical days — {number_of_days} days from {start.isoformat()}[/bold]",
        border_style="yellow",
        expand=False,
    ))


def display_compatibility(result, title: str):
    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Category", style="dim")
    table.add_column("Score", style="bold", justify="right")
    table.add_column("Level")

    levels = compatibility.synergy_levels(result)
    for category, value in result.per_category.items():
        table.add_row(content.cycle_name(category), f"{value:.2f}", levels[category])
    table.add_row("", "", "")
    table.add_row("Overall", f"{result.overall:.2f}", content.rating_label(result.rating))

    activities = "\n".join(
        f"• {content.activity(key)}" for key in compatibility.shared_activity_keys(result)
    )
    console.print(Panel(table, title=f"[bold]{title}[/bold]", border_style="magenta", expand=False))
    console.print(Panel(activities, title="Try together", border_style="dim", expand=False))


def cmd_biorhythm(args, today: date) -> int:
    birth = validate_date(args.birth, today, field="birth date")
    if not birth.ok:
        return _reject(birth.error)
    target = validate_target_date(args.date, today)
    if not target.ok:
        return _reject(target.error)
    if target.value < birth.value:
        return _reject("date cannot be before the birth date")

    if args.partner:
        partner = validate_date(args.partner, today, field="partner birth date")
        if not partner.ok:
            return _reject(partner.error)
        if target.value < partner.value:
            return _reject("date cannot be before the partner's birth date")
        result = compatibility.biorhythm_compatibility(birth.value, partner.value, target.value)
        logger.info(f"Biorhythm compatibility on {target.value.isoformat()}: {result.overall}")
        display_compatibility(result, f"Biorhythm compatibility — {target.value.isoformat()}")
        return EXIT_OK

    if args.critical:
        critical_days = period.find_critical(birth.value, target.value, config.CRITICAL_WINDOW_DAYS)
        logger.info(f"{len(critical_days)} critical day(s) ahead")
        display_critical_days(critical_days, target.value, config.CRITICAL_WINDOW_DAYS)
        return EXIT_OK

    if args.days is not None:
        length = validate_range_length(args.days)
        if not length.ok:
            return _reject(length.error)
        summary = period.aggregate(birth.value, target.value, length.value)
        logger.info(
            f"Biorhythm period of {length.value} days from {target.value.isoformat()}: "
            f"{summary.critical_day_count} critical"
        )
        display_period(summary)
        return EXIT_OK

    day = cycle_engine.evaluate_day(birth.value, target.value)
    logger.info(f"Biorhythm for {day.date.isoformat()}: advice={day.advice_key}")
    display_biorhythm_day(day)
    return EXIT_OK


# ── Lunar ──────────────────────────────────────────────────────────────────────

def display_lunar_sample(sample):
    full_at, full_in = lunar.next_full_moon(sample.moment)
    new_at, new_in = lunar.next_new_moon(sample.moment)

    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Phase",        content.phase_name(sample.phase))
    table.add_row("Illumination", f"{sample.illumination}%")
    table.add_row("Lunar age",    f"{sample.lunar_age:.2f} days")
    table.add_row("Trend",        "waxing" if sample.is_waxing else "waning")
    table.add_row("Next phase",   f"{content.phase_name(sample.next_phase)} "
                                  f"in {sample.days_until_next_phase:.2f} days")
    table.add_row("Next full",    f"{full_at:%Y-%m-%d %H:%M} UTC  ({cycle_engine.round2(full_in):.2f} d)")
    table.add_row("Next new",     f"{new_at:%Y-%m-%d %H:%M} UTC  ({cycle_engine.round2(new_in):.2f} d)")

    console.print(Panel(
        table,
        title=f"[bold]Moon — {sample.moment:%Y-%m-%d %H:%M} UTC[/bold]",
        subtitle=content.phase_guidance(sample.phase),
        border_style="blue",
        expand=False,
    ))


def display_lunar_calendar(month):
    table = Table(box=box.SIMPLE, padding=(0, 1))
    table.add_column("Day", justify="right", style="dim")
    table.add_column("Phase")
    table.add_column("Illum.", justify="right")

    for day in month.days:
        style = "bold" if day.is_new_moon or day.is_full_moon else None
        table.add_row(
            str(day.day_of_month),
            content.phase_name(day.phase),
            f"{day.illumination}%",
            style=style,
        )

    console.print(Panel(
        table,
        title=f"[bold]Lunar calendar — {month.year}-{month.month:02d}[/bold]",
        subtitle=f"{len(month.new_moons)} new-moon day(s), {len(month.full_moons)} full-moon day(s)",
        border_style="blue",
        expand=False,
    ))


def cmd_lunar(args, today: date) -> int:
    if args.calendar:
        month = validate_month(args.calendar)
        if not month.ok:
            return _reject(month.error)
        year, month_number = month.value
        calendar_month = period.lunar_calendar(year, month_number)
        logger.info(f"Lunar calendar {year}-{month_number:02d} rendered")
        display_lunar_calendar(calendar_month)
        return EXIT_OK

    if args.date:
        target = validate_target_date(args.date, today)
        if not target.ok:
            return _reject(target.error)
        moment = datetime.combine(
            target.value, time(config.CALENDAR_SAMPLE_HOUR_UTC, 0), tzinfo=timezone.utc
        )
    else:
        moment = datetime.now(timezone.utc)

    sample = lunar.evaluate(moment)
    logger.info(f"Moon at {moment.isoformat()}: {sample.phase}")
    display_lunar_sample(sample)
    return EXIT_OK


# ── Numerology ─────────────────────────────────────────────────────────────────

def cmd_numerology(args, today: date) -> int:
    name = validate_name(args.name)
    if not name.ok:
        return _reject(name.error)
    birth = validate_date(args.birth, today, field="birth date")
    if not birth.ok:
        return _reject(birth.error)
    target = validate_target_date(args.date, today)
    if not target.ok:
        return _reject(target.error)

    profile = numerology.numerology_profile(name.value, birth.value, target.value.year)
    energy = numerology.combined_energy(profile.personal_year, target.value)

    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Number", style="dim")
    table.add_column("Value", style="bold", justify="right")
    table.add_column("Theme")
    for label, value in (
        ("Life Path",     profile.life_path),
        ("Destiny",       profile.destiny),
        ("Soul Urge",     profile.soul_urge),
        ("Personality",   profile.personality),
        ("Birthday",      profile.birthday),
        ("Personal Year", profile.personal_year),
    ):
        table.add_row(label, str(value), content.number_theme(value))
    table.add_row("", "", "")
    table.add_row("Universal Day", str(numerology.universal_day_number(target.value)), "")
    table.add_row("Today's energy", str(energy), content.number_theme(energy))
    table.add_row("Lucky hours", ", ".join(str(h) for h in numerology.lucky_hours(energy)), "")
    table.add_row(
        "Compatible",
        ", ".join(str(n) for n in numerology.compatible_numbers(profile.life_path)),
        "",
    )

    logger.info(f"Numerology profile built (life path {profile.life_path})")
    console.print(Panel(
        table,
        title=f"[bold]Numerology — {profile.name}[/bold]",
        subtitle="master number present" if profile.has_master_number else None,
        border_style="green",
        expand=False,
    ))
    return EXIT_OK


# ── Tarot ──────────────────────────────────────────────────────────────────────

def cmd_tarot(args, today: date) -> int:
    target = validate_target_date(args.date, today)
    if not target.ok:
        return _reject(target.error)

    draw = seed.daily_card(target.value, args.user)
    lucky = seed.daily_lucky_numbers(target.value, args.user)

    card = draw.card_id.replace("-", " ").title()
    orientation = "[red]reversed[/red]" if draw.reversed else "[green]upright[/green]"
    body = (
        f"[bold]{card}[/bold]  ({draw.arcana} arcana, {orientation})\n"
        f"Lucky numbers: {', '.join(str(n) for n in lucky)}"
    )
    logger.info(f"Card of the day for {draw.identity}: {draw.card_id}")
    console.print(Panel(
        body,
        title=f"[bold]Card of the day — {draw.date.isoformat()}[/bold]",
        border_style="magenta",
        expand=False,
    ))
    return EXIT_OK


# ── Zodiac signs ───────────────────────────────────────────────────────────────

def display_daily_sign(reading):
    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Element",      config.SIGN_ELEMENT[reading.sign])
    table.add_row("Lucky number", str(reading.lucky_number))
    table.add_row("Lucky colour", content.color_name(reading.lucky_color))
    table.add_row("Lucky time",   reading.lucky_time)

    console.print(Panel(
        table,
        title=f"[bold]{reading.sign.title()} — {reading.date.isoformat()}[/bold]",
        subtitle=content.mood_text(reading.mood),
        border_style="magenta",
        expand=False,
    ))


def cmd_daily_sign(args, today: date) -> int:
    sign = validate_sign(args.daily)
    if not sign.ok:
        return _reject(sign.error)
    target = validate_target_date(args.date, today)
    if not target.ok:
        return _reject(target.error)

    reading = seed.daily_sign_reading(target.value, sign.value)
    logger.info(f"Daily reading for {reading.sign}: {reading.mood}")
    display_daily_sign(reading)
    return EXIT_OK


def cmd_signs(args, today: date) -> int:
    if args.daily:
        return cmd_daily_sign(args, today)

    if args.birth or args.partner:
        birth = validate_date(args.birth, today, field="birth date")
        if not birth.ok:
            return _reject(birth.error)
        partner = validate_date(args.partner, today, field="partner birth date")
        if not partner.ok:
            return _reject(partner.error)
        sign_a = compatibility.zodiac_sign(birth.value)
        sign_b = compatibility.zodiac_sign(partner.value)
    else:
        if len(args.signs) != 2:
            return _reject("give two zodiac signs or --birth and --partner")
        checked = [validate_sign(s) for s in args.signs]
        for result in checked:
            if not result.ok:
                return _reject(result.error)
        sign_a, sign_b = (result.value for result in checked)

    result = compatibility.sign_compatibility(sign_a, sign_b)
    logger.info(f"Sign compatibility {sign_a}/{sign_b}: {result.overall} ({result.rating})")
    display_compatibility(result, f"{sign_a.title()} & {sign_b.title()}")
    return EXIT_OK


# ── Daily digest ───────────────────────────────────────────────────────────────

def daily_digest():
    """One-screen summary of the day: moon, universal day and card of the day."""
    now = datetime.now(timezone.utc)
    logger.info(f"=== Daily digest — {now.isoformat()} ===")

    sample = lunar.evaluate(now)
    udn = numerology.universal_day_number(now.date())
    draw = seed.daily_card(now.date(), config.DEFAULT_IDENTITY)

    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Moon",          f"{content.phase_name(sample.phase)}  {sample.illumination}%")
    table.add_row("Guidance",      content.phase_guidance(sample.phase))
    table.add_row("Universal day", f"{udn}  {content.number_theme(udn)}")
    table.add_row("Card",          draw.card_id.replace("-", " ").title()
                                   + ("  (reversed)" if draw.reversed else ""))

    console.print(Panel(
        table,
        title=f"[bold cyan]Cosmic Cycles — {now.date().isoformat()}[/bold cyan]",
        border_style="cyan",
        expand=False,
    ))


def cmd_digest(args, today: date) -> int:
    daily_digest()
    if not args.watch:
        return EXIT_OK

    scheduler = BlockingScheduler(timezone="UTC")
    scheduler.add_job(
        daily_digest,
        trigger="cron",
        hour=config.DIGEST_HOUR_UTC,
        minute=0,
        id="daily_digest",
        max_instances=1,
        coalesce=True,
    )
    logger.info(f"Scheduler started — digest daily at {config.DIGEST_HOUR_UTC:02d}:00 UTC.")
    logger.info("Press Ctrl+C to stop.")

    try:
        scheduler.start()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Digest stopped by user.")
    return EXIT_OK


# ── Entry point ────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cosmic Cycles — biorhythm, moon, numbers and cards")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("biorhythm", help="Biorhythm reading for a birth date")
    p.add_argument("--birth", required=True, help="Birth date (YYYY-MM-DD)")
    p.add_argument("--date", help="Target date, default today")
    p.add_argument("--days", help="Summarise a 7 or 30 day window starting at --date")
    p.add_argument("--critical", action="store_true",
                   help=f"List critical days in the next {config.CRITICAL_WINDOW_DAYS} days")
    p.add_argument("--partner", help="Partner birth date for compatibility")
    p.set_defaults(handler=cmd_biorhythm)

    p = sub.add_parser("lunar", help="Moon phase or monthly lunar calendar")
    p.add_argument("--date", help="Date (YYYY-MM-DD), default now")
    p.add_argument("--calendar", help="Month (YYYY-MM)")
    p.set_defaults(handler=cmd_lunar)

    p = sub.add_parser("numerology", help="Core numbers for a name and birth date")
    p.add_argument("--name", required=True)
    p.add_argument("--birth", required=True, help="Birth date (YYYY-MM-DD)")
    p.add_argument("--date", help="Target date, default today")
    p.set_defaults(handler=cmd_numerology)

    p = sub.add_parser("tarot", help="Card of the day")
    p.add_argument("--user", help=f"Identity, default {config.DEFAULT_IDENTITY!r}")
    p.add_argument("--date", help="Date (YYYY-MM-DD), default today")
    p.set_defaults(handler=cmd_tarot)

    p = sub.add_parser("signs", help="Zodiac sign compatibility")
    p.add_argument("signs", nargs="*", help="Two sign ids, e.g. leo aries")
    p.add_argument("--birth", help="Birth date (YYYY-MM-DD)")
    p.add_argument("--partner", help="Partner birth date (YYYY-MM-DD)")
    p.add_argument("--daily", metavar="SIGN", help="Mood and lucky picks of the day for one sign")
    p.add_argument("--date", help="Date for --daily (YYYY-MM-DD), default today")
    p.set_defaults(handler=cmd_signs)

    p = sub.add_parser("digest", help="Daily digest")
    p.add_argument("--watch", action="store_true",
                   help=f"Keep running and print the digest daily at {config.DIGEST_HOUR_UTC:02d}:00 UTC")
    p.set_defaults(handler=cmd_digest)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.handler(args, _today())


def configure_logging():
    logger.remove()
    logger.add(
        sys.stderr,
        level=config.LOG_LEVEL,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    os.makedirs(config.LOG_DIR, exist_ok=True)
    logger.add(
        os.path.join(config.LOG_DIR, "cosmic_cycles_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="30 days",
        level="DEBUG",
    )


def run():
    """Console script entry: sinks first, then the command."""
    configure_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
