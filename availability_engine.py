"""
Employee Availability Dashboard
Reads job-assignment records from Excel/CSV, computes calendar-aware availability
and utilisation per employee and for the whole team, and outputs a Gantt of
consolidated assignment periods plus a daily team capacity chart as PNGs.

Features:
  - Job-code categorisation (chargeable, absence, LOA, training, reservation, ...)
  - Day-by-day utilisation honouring weekends and public holidays
  - Consolidation of adjacent, identical assignment periods per job
  - Team statistics (available / partially booked / fully booked)
  - Week, month, quarter or custom timeline windows
"""

import argparse
import io
import math
import os
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import matplotlib.dates as mdates
from matplotlib.patches import FancyBboxPatch
import numpy as np
import pandas as pd
from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side


# ── Constants ────────────────────────────────────────────────────────────────

_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_INPUT = os.path.join(_DIR, "assignments.xlsx")
DEFAULT_OUTDIR = os.path.join(_DIR, "output")

HOURS_PER_DAY = 8
PROVISIONAL_STATUS = "P"

# French public holidays as MM-DD. Movable feasts (Easter Monday, Ascension,
# Whit Monday) use their 2025 dates and are applied to every year.
PUBLIC_HOLIDAYS = frozenset({
    "04-21",  # Easter Monday
    "05-01",  # Labour Day
    "05-08",  # Victory in Europe Day
    "05-29",  # Ascension Day
    "06-09",  # Whit Monday
    "07-14",  # Bastille Day
    "08-15",  # Assumption
    "11-11",  # Armistice Day
    "12-25",  # Christmas Day
})

CATEGORIES = ["chargeable", "absence", "reservation", "training",
              "loa", "pending", "other", "unknown"]

# Sentinel job codes; anything not listed falls through to the prefix rule.
JOB_CODE_CATEGORIES = {
    "9999999996": "reservation",
    "9999999980": "training",
    "9999999910": "loa",
    "9999999911": "loa",
    "7777777777": "pending",
}

CATEGORY_LABELS = {
    "absence": "Absence/Holidays",
    "reservation": "Reservation w/o jobcode",
    "training": "Training",
    "loa": "LOA (Leave of Absence)",
    "pending": "Pending jobcode",
    "chargeable": "Chargeable",
    "other": "Other",
    "unknown": "Unknown",
}

CATEGORY_COLORS = {
    "absence": "#EF4444",
    "reservation": "#6B7280",
    "training": "#22C55E",
    "loa": "#A855F7",
    "pending": "#EAB308",
    "other": "#F97316",
    "unknown": "#9CA3AF",
}

# Chargeable bars get darker as utilisation rises: (threshold, colour)
CHARGEABLE_SHADES = [
    (100, "#2563EB"),
    (75, "#3B82F6"),
    (50, "#60A5FA"),
    (0, "#93C5FD"),
]

# Display sections for consolidated jobs; unlisted categories go under "other".
CATEGORY_SECTIONS = ["chargeable", "pending", "reservation", "training",
                     "absence", "loa", "other"]

TIMEFRAMES = ["week", "month", "quarter", "custom"]

_PRESET_OFFSETS = {
    "week": (pd.DateOffset(days=-7), pd.DateOffset(days=21)),
    "month": (pd.DateOffset(months=-1), pd.DateOffset(months=2)),
    "quarter": (pd.DateOffset(months=-3), pd.DateOffset(months=6)),
}

RECORD_COLUMNS = [
    "EmpID", "LastName", "FirstName", "JobNo", "JobName",
    "StartDate", "EndDate", "Utilization", "Status", "Hours",
    "StartDateParsed", "EndDateParsed", "UtilPercent",
    "WorkingDays", "HoursTotal", "HoursPerDay",
]

STYLE = {
    "font_family": "DejaVu Sans",
    "title_size": 18,
    "subtitle_size": 13,
    "label_size": 9.5,
    "tick_size": 8.5,
    "small_size": 7.5,
    "bg_color": "#FAFAFA",
    "panel_bg": "#FFFFFF",
    "text_primary": "#1A1A2E",
    "text_secondary": "#555555",
    "text_muted": "#999999",
    "grid_color": "#E0E0E0",
    "today_color": "#D32F2F",
    "over_capacity_color": "#E53935",
    "capacity_line_color": "#1A1A2E",
    "free_color": "#43A047",
    "row_shade_even": "#F5F5F5",
    "row_shade_odd": "#FFFFFF",
    "employee_header_bg": "#E3F2FD",
    "bar_height": 0.6,
    "dpi": 180,
    "fig_width": 20,
    "provisional_alpha": 0.7,
    "confirmed_alpha": 0.9,
    "weekend_color": "#E0E0E0",
    "holiday_color": "#E1BEE7",
    "holiday_edge_color": "#7B1FA2",
}


# ── Style Helpers ────────────────────────────────────────────────────────────

def apply_style():
    """Configure matplotlib rcParams for consistent styling."""
    plt.rcParams.update({
        "font.family": STYLE["font_family"],
        "font.size": STYLE["label_size"],
        "axes.facecolor": STYLE["panel_bg"],
        "figure.facecolor": STYLE["bg_color"],
        "axes.edgecolor": STYLE["grid_color"],
        "axes.linewidth": 0.8,
        "axes.grid": False,
        "grid.color": STYLE["grid_color"],
        "grid.linewidth": 0.5,
        "grid.alpha": 0.3,
        "xtick.color": STYLE["text_secondary"],
        "ytick.color": STYLE["text_secondary"],
        "text.color": STYLE["text_primary"],
    })


def style_axes(ax, title="", ylabel="", show_grid_x=False, show_grid_y=False):
    """Apply consistent axis styling to any subplot."""
    if title:
        ax.set_title(title, fontsize=STYLE["subtitle_size"], fontweight="bold",
                     color=STYLE["text_primary"], pad=12, loc="left")
    if ylabel:
        ax.set_ylabel(ylabel, fontsize=STYLE["label_size"], color=STYLE["text_secondary"])
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["left"].set_linewidth(0.6)
    ax.spines["bottom"].set_linewidth(0.6)
    if show_grid_x:
        ax.grid(axis="x", alpha=0.15, linewidth=0.5, color=STYLE["grid_color"])
    if show_grid_y:
        ax.grid(axis="y", alpha=0.15, linewidth=0.5, color=STYLE["grid_color"])
    ax.set_axisbelow(True)


def add_header_footer(fig, title, subtitle=""):
    """Add a title block and generation timestamp footer."""
    fig.suptitle(title, fontsize=STYLE["title_size"], fontweight="bold",
                 color=STYLE["text_primary"], y=0.98, x=0.04, ha="left")
    if subtitle:
        fig.text(0.04, 0.948, subtitle, fontsize=STYLE["small_size"] + 1,
                 color=STYLE["text_muted"], ha="left")
    fig.text(0.98, 0.008, f"Generated {datetime.now().strftime('%d %b %Y %H:%M')}",
             ha="right", fontsize=STYLE["small_size"], color=STYLE["text_muted"])
    footer_left = "Employee Availability Dashboard"
    source = STYLE.get("_data_source")
    if source:
        footer_left += f"  ·  {source}"
    fig.text(0.04, 0.008, footer_left,
             ha="left", fontsize=STYLE["small_size"], color=STYLE["text_muted"])


def draw_today_line(ax, window, y_top, now=None):
    """Draw a 'Today' marker if today falls within the window."""
    today = norm_date(now) if now is not None else date.today()
    if today not in window:
        return
    today_num = mdates.date2num(_as_datetime(today)) + 0.5
    ax.axvspan(today_num - 0.3, today_num + 0.3,
               color=STYLE["today_color"], alpha=0.06, zorder=1)
    ax.axvline(today_num, color=STYLE["today_color"], linewidth=2,
               linestyle="-", alpha=0.7, zorder=10)
    ax.text(today_num + 0.5, y_top, "Today", fontsize=STYLE["small_size"] + 0.5,
            color=STYLE["today_color"], fontweight="bold", va="bottom",
            ha="left", style="italic")


def draw_rounded_bar(ax, x, y, width, height, color, alpha=1.0,
                     edgecolor=None, linewidth=1.0, zorder=3):
    """Draw a horizontal bar with rounded corners using FancyBboxPatch."""
    if width <= 0:
        return None
    rounding = min(0.12, height * 0.3, width * 0.05)
    fancy = FancyBboxPatch(
        (x, y - height / 2), width, height,
        boxstyle=f"round,pad=0,rounding_size={rounding}",
        facecolor=color, alpha=alpha,
        edgecolor=edgecolor or color, linewidth=linewidth,
        zorder=zorder,
    )
    ax.add_patch(fancy)
    return fancy


def assignment_color(category, utilization=0):
    """Bar colour for a category; chargeable work is shaded by utilisation."""
    if category == "chargeable":
        for threshold, color in CHARGEABLE_SHADES:
            if utilization >= threshold:
                return color
        return CHARGEABLE_SHADES[-1][1]
    return CATEGORY_COLORS.get(category, CATEGORY_COLORS["unknown"])


# ── Cell Helpers ─────────────────────────────────────────────────────────────

def clean_str(val):
    """Return stripped string or empty string for NaN/None/NaT."""
    if val is None or val is pd.NaT:
        return ""
    if isinstance(val, float) and math.isnan(val):
        return ""
    return str(val).strip()


_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def clean_float(val):
    """Parse the leading number of a cell ('75%' -> 75.0). Blank or junk -> 0.0."""
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        return 0.0 if math.isnan(val) else float(val)
    match = _LEADING_NUMBER.match(clean_str(val))
    if not match:
        return 0.0
    return float(match.group(0))


def clean_job_code(val):
    """Job codes read from spreadsheets may arrive as 20001.0; keep the digits only."""
    if isinstance(val, float) and not math.isnan(val) and val.is_integer():
        return str(int(val))
    return clean_str(val)


class _TeeWriter:
    """Write to two streams simultaneously (for summary.txt capture)."""
    def __init__(self, a, b):
        self.a, self.b = a, b
    def write(self, data):
        self.a.write(data)
        self.b.write(data)
    def flush(self):
        self.a.flush()
        self.b.flush()


# ── Date Normalisation ───────────────────────────────────────────────────────

_ISO_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T ].*)?$")


def normalize_date(value):
    """Convert a date cell to a canonical 'YYYY-MM-DD' string.

    Accepts ISO (YYYY-MM-DD), US slash (MM/DD/YY or MM/DD/YYYY), dotted
    (DD.MM.YYYY) and date/datetime/Timestamp values. Two-digit years are
    read as 20YY. Returns None for blank, unparseable or impossible dates.
    """
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = clean_str(value)
    if not text:
        return None
    if "/" in text:
        parts = text.split("/")
        if len(parts) != 3:
            return None
        month, day, year = parts
    elif "." in text:
        parts = text.split(".")
        if len(parts) != 3:
            return None
        day, month, year = parts
    else:
        match = _ISO_DATE.match(text)
        if not match:
            return None
        year, month, day = match.groups()

    year = year.strip()
    if len(year) == 2:
        year = "20" + year
    try:
        return date(int(year), int(month), int(day)).isoformat()
    except ValueError:
        return None


def to_date(value):
    """Like normalize_date but returns a datetime.date (or None)."""
    iso = normalize_date(value)
    return date.fromisoformat(iso) if iso else None


def norm_date(d):
    """Normalise a date-like value to a calendar day (datetime.date)."""
    if d is pd.NaT:
        raise ValueError("norm_date got NaT")
    if isinstance(d, datetime):
        return d.date()
    if isinstance(d, date):
        return d
    if isinstance(d, str):
        iso = normalize_date(d)
        if iso is None:
            raise ValueError(f"Cannot parse date: {d!r}")
        return date.fromisoformat(iso)
    raise TypeError(f"norm_date expected a date, got {type(d).__name__}: {d!r}")


def _as_datetime(d):
    return datetime(d.year, d.month, d.day)


# ── Calendar ─────────────────────────────────────────────────────────────────

def is_weekend(day):
    """Saturday or Sunday."""
    return norm_date(day).weekday() >= 5


def is_public_holiday(day, public_holidays=None):
    """True if the day's MM-DD is in the holiday set (year is ignored)."""
    holidays = PUBLIC_HOLIDAYS if public_holidays is None else public_holidays
    return norm_date(day).strftime("%m-%d") in holidays


def is_working_day(day, public_holidays=None):
    """Check if a date is a working day (not weekend, not public holiday)."""
    d = norm_date(day)
    return not is_weekend(d) and not is_public_holiday(d, public_holidays)


def iter_days(start, end):
    """Yield every calendar day from start to end inclusive."""
    current, last = norm_date(start), norm_date(end)
    while current <= last:
        yield current
        current += timedelta(days=1)


def count_working_days(start, end, public_holidays=None):
    """Count working days between start and end (inclusive)."""
    return sum(1 for d in iter_days(start, end) if is_working_day(d, public_holidays))


# ── Job Categories ───────────────────────────────────────────────────────────

def categorize_job(job_code):
    """Map a job code to its category. Never raises."""
    code = clean_job_code(job_code)
    if not code:
        return "unknown"
    if len(code) == 4:
        return "absence"
    if code in JOB_CODE_CATEGORIES:
        return JOB_CODE_CATEGORIES[code]
    return "chargeable" if code.startswith("2") else "other"


def category_label(category):
    return CATEGORY_LABELS.get(category, "Unknown")


def hours_bucket(category):
    """Which hour total a category feeds: 'chargeable', 'absence' or 'other'."""
    if category == "chargeable":
        return "chargeable"
    if category in ("absence", "loa"):
        return "absence"
    return "other"


def _rate(numerator, denominator):
    """Percentage with a zero guard on the denominator."""
    return (numerator / denominator) * 100 if denominator > 0 else 0.0


# ── Data Model ───────────────────────────────────────────────────────────────

@dataclass
class RawAssignmentRecord:
    """One row of the assignment export, in column order."""

    emp_id: str = ""
    last_name: str = ""
    first_name: str = ""
    job_code: str = ""
    job_name: str = ""
    start_date: object = ""
    end_date: object = ""
    utilization: float = 0.0
    status: str = ""
    hours: float = 0.0
    start_date_parsed: object = ""
    end_date_parsed: object = ""
    util_percent: str = ""
    working_days: float = 0.0
    hours_total: float = 0.0
    hours_per_day: float = 0.0

    @classmethod
    def from_row(cls, row):
        """Build a record from a positional row; short rows are padded with blanks."""
        values = list(row)[:len(RECORD_COLUMNS)]
        values += [None] * (len(RECORD_COLUMNS) - len(values))
        (emp_id, last_name, first_name, job_code, job_name, start_date, end_date,
         utilization, status, hours, start_parsed, end_parsed, util_percent,
         working_days, hours_total, hours_per_day) = values
        return cls(
            emp_id=clean_job_code(emp_id),
            last_name=clean_str(last_name),
            first_name=clean_str(first_name),
            job_code=clean_job_code(job_code),
            job_name=clean_str(job_name),
            start_date=_clean_date_cell(start_date),
            end_date=_clean_date_cell(end_date),
            utilization=clean_float(utilization),
            status=clean_str(status),
            hours=clean_float(hours),
            start_date_parsed=_clean_date_cell(start_parsed),
            end_date_parsed=_clean_date_cell(end_parsed),
            util_percent=clean_str(util_percent),
            working_days=clean_float(working_days),
            hours_total=clean_float(hours_total),
            hours_per_day=clean_float(hours_per_day),
        )

    @property
    def display_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    def preferred_dates(self):
        """The parsed date pair when both are filled in, otherwise the raw pair."""
        if clean_str(self.start_date_parsed) and clean_str(self.end_date_parsed):
            return self.start_date_parsed, self.end_date_parsed
        return self.start_date, self.end_date


def _clean_date_cell(val):
    if isinstance(val, (datetime, date)) and val is not pd.NaT:
        return val
    return clean_str(val)


@dataclass(frozen=True)
class Assignment:
    job_name: str
    job_code: str
    start: date
    end: date
    hours_per_day: float
    utilization: float
    status: str
    category: str

    def covers(self, day):
        return self.start <= day <= self.end

    @property
    def day_count(self):
        """Calendar days in the assignment, both ends included."""
        return (self.end - self.start).days + 1


@dataclass
class Employee:
    emp_id: str
    name: str
    assignments: list = field(default_factory=list)
    chargeable_hours: float = 0.0
    absence_hours: float = 0.0
    other_hours: float = 0.0
    total_hours: float = 0.0
    total_utilization: float = 0.0
    projects: set = field(default_factory=set)
    net_available_hours: float = 0.0
    true_utilization_rate: float = 0.0
    available_capacity_hours: float = 0.0
    record_count: int = 0

    @property
    def project_count(self):
        return len(self.projects)

    @property
    def skipped_records(self):
        """Rows seen for this employee that produced no assignment."""
        return self.record_count - len(self.assignments)


@dataclass(frozen=True)
class TimelineWindow:
    start: date
    end: date

    def __contains__(self, day):
        return self.start <= norm_date(day) <= self.end

    @property
    def day_count(self):
        return (self.end - self.start).days + 1

    def days(self):
        return iter_days(self.start, self.end)

    def overlaps(self, start, end):
        return start <= self.end and end >= self.start


@dataclass(frozen=True)
class DailyUtilizationSample:
    date: date
    chargeable_hours: float
    absence_hours: float
    other_hours: float
    net_available_hours: float
    utilization_rate: float
    available_capacity_hours: float
    is_working_day: bool
    is_weekend: bool
    is_public_holiday: bool


@dataclass
class TimelineUtilization:
    """Window totals for one employee plus the day-by-day series."""

    chargeable_hours: float = 0.0
    absence_hours: float = 0.0
    working_days: int = 0
    net_available_hours: float = 0.0
    utilization_rate: float = 0.0
    available_capacity_hours: float = 0.0
    daily: list = field(default_factory=list)

    @property
    def is_over_allocated(self):
        return self.utilization_rate > 100


@dataclass
class ConsolidatedPeriod:
    start: date
    end: date
    hours_per_day: float
    utilization: float
    status: str
    category: str
    has_provisional: bool = False


@dataclass
class ConsolidatedJob:
    job_name: str
    job_code: str
    category: str
    status: str
    periods: list = field(default_factory=list)
    has_provisional: bool = False
    total_utilization: float = 0.0
    total_hours: float = 0.0


@dataclass
class CategoryTotals:
    count: int = 0
    total_hours: float = 0.0


@dataclass
class TeamStats:
    total: int = 0
    available: int = 0
    partially_booked: int = 0
    fully_booked: int = 0
    total_chargeable_hours: float = 0.0
    total_net_available_hours: float = 0.0
    overall_utilization_rate: float = 0.0
    category_breakdown: dict = field(default_factory=dict)


# ── Timeline ─────────────────────────────────────────────────────────────────

def resolve_timeline(timeframe="month", now=None, custom_start=None, custom_end=None,
                     fallback="month"):
    """Turn a timeframe selection into a concrete inclusive window.

    Presets are relative to `now` (default: today):
      week     now - 7 days   .. now + 21 days
      month    now - 1 month  .. now + 2 months
      quarter  now - 3 months .. now + 6 months
    'custom' uses custom_start/custom_end. If either is missing or
    unparseable the `fallback` preset is used instead; a reversed range is
    swapped so the window always runs forwards.
    """
    if timeframe not in TIMEFRAMES:
        raise ValueError(f"Unknown timeframe {timeframe!r}. Valid: {', '.join(TIMEFRAMES)}")
    today = norm_date(now) if now is not None else date.today()

    if timeframe == "custom":
        start, end = to_date(custom_start), to_date(custom_end)
        if start and end:
            if start > end:
                start, end = end, start
            return TimelineWindow(start, end)
        timeframe = fallback
        if timeframe not in _PRESET_OFFSETS:
            raise ValueError(f"Fallback timeframe must be a preset, got {fallback!r}")

    before, after = _PRESET_OFFSETS[timeframe]
    anchor = pd.Timestamp(today)
    return TimelineWindow((anchor + before).date(), (anchor + after).date())


def position_in_window(day, window):
    """Horizontal position of a day inside the window as 0-100 percent."""
    span = (window.end - window.start).days
    if span <= 0:
        return 0.0
    offset = (norm_date(day) - window.start).days
    return max(0.0, min(100.0, offset / span * 100))


def timeline_labels(window, timeframe="month"):
    """Tick dates for a window: daily for week, weekly for month, monthly otherwise."""
    if timeframe == "week":
        step = pd.DateOffset(days=1)
    elif timeframe == "month":
        step = pd.DateOffset(days=7)
    else:
        step = pd.DateOffset(months=1)

    labels = []
    current = pd.Timestamp(window.start)
    end = pd.Timestamp(window.end)
    while current <= end:
        d = current.date()
        labels.append((d, position_in_window(d, window)))
        current = current + step
    return labels


# ── Employee Aggregation ─────────────────────────────────────────────────────

def normalize_record(record):
    """Build an Assignment from a raw record, or None when its dates are unusable."""
    raw_start, raw_end = record.preferred_dates()
    start, end = to_date(raw_start), to_date(raw_end)
    if start is None or end is None or end < start:
        return None
    return Assignment(
        job_name=record.job_name,
        job_code=record.job_code,
        start=start,
        end=end,
        hours_per_day=record.hours_per_day,
        utilization=record.utilization,
        status=record.status,
        category=categorize_job(record.job_code),
    )


def _coerce_record(record):
    if isinstance(record, RawAssignmentRecord):
        return record
    if isinstance(record, (list, tuple)):
        return RawAssignmentRecord.from_row(record)
    raise TypeError(f"Expected RawAssignmentRecord or row sequence, got {type(record).__name__}")


def _apply_summary_rates(emp):
    """Window-independent rates from the assignments' own calendar span.

    Overlapping assignments each contribute their full day count.
    """
    total_days = sum(a.day_count for a in emp.assignments)
    divisor = max(total_days, 1)
    avg_chargeable = emp.chargeable_hours / divisor
    avg_absence = emp.absence_hours / divisor

    emp.net_available_hours = max(0.0, HOURS_PER_DAY - avg_absence)
    emp.available_capacity_hours = max(0.0, emp.net_available_hours - avg_chargeable)
    emp.true_utilization_rate = _rate(avg_chargeable, emp.net_available_hours)


def build_employees(records):
    """Group raw records by employee id and compute per-employee summary rates.

    Records with missing or unparseable dates still register their employee but
    add no assignment. Returns employees sorted by true utilisation, highest
    first; ties keep the order in which employees first appear.
    """
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        raise TypeError(f"records must be a sequence, got {type(records).__name__}")

    employees = {}
    for raw in records:
        record = _coerce_record(raw)
        emp = employees.get(record.emp_id)
        if emp is None:
            emp = employees[record.emp_id] = Employee(emp_id=record.emp_id,
                                                      name=record.display_name)
        emp.record_count += 1

        assignment = normalize_record(record)
        if assignment is None:
            continue
        emp.assignments.append(assignment)

        bucket = hours_bucket(assignment.category)
        if bucket == "chargeable":
            emp.chargeable_hours += assignment.hours_per_day
        elif bucket == "absence":
            emp.absence_hours += assignment.hours_per_day
        else:
            emp.other_hours += assignment.hours_per_day
        emp.total_hours += assignment.hours_per_day
        emp.total_utilization += assignment.utilization
        emp.projects.add(assignment.job_name)

    for emp in employees.values():
        emp.assignments.sort(key=lambda a: a.start)
        _apply_summary_rates(emp)

    return sorted(employees.values(), key=lambda e: e.true_utilization_rate, reverse=True)


# ── Daily Utilisation ────────────────────────────────────────────────────────

def calculate_timeline_utilization(employee, window, public_holidays=None):
    """Walk the window day by day and total the employee's hours.

    Every calendar day yields a DailyUtilizationSample. Hours from every
    assignment covering the day are reported on it, but only working days get
    net available hours, a utilisation rate and free capacity, and only
    working days count towards the window totals.
    """
    assignments = employee.assignments if isinstance(employee, Employee) else list(employee)

    chargeable_total = 0.0
    absence_total = 0.0
    working_days = 0
    daily = []

    for day in window.days():
        weekend = is_weekend(day)
        holiday = is_public_holiday(day, public_holidays)
        working = not weekend and not holiday

        hours = {"chargeable": 0.0, "absence": 0.0, "other": 0.0}
        for a in assignments:
            if a.covers(day):
                hours[hours_bucket(a.category)] += a.hours_per_day or 0.0

        if working:
            working_days += 1
            net = max(0.0, HOURS_PER_DAY - hours["absence"])
            rate = _rate(hours["chargeable"], net)
            capacity = max(0.0, net - hours["chargeable"])
            chargeable_total += hours["chargeable"]
            absence_total += hours["absence"]
        else:
            net = rate = capacity = 0.0

        daily.append(DailyUtilizationSample(
            date=day,
            chargeable_hours=hours["chargeable"],
            absence_hours=hours["absence"],
            other_hours=hours["other"],
            net_available_hours=net,
            utilization_rate=rate,
            available_capacity_hours=capacity,
            is_working_day=working,
            is_weekend=weekend,
            is_public_holiday=holiday,
        ))

    net_total = max(0.0, working_days * HOURS_PER_DAY - absence_total)
    return TimelineUtilization(
        chargeable_hours=chargeable_total,
        absence_hours=absence_total,
        working_days=working_days,
        net_available_hours=net_total,
        utilization_rate=_rate(chargeable_total, net_total),
        available_capacity_hours=max(0.0, net_total - chargeable_total),
        daily=daily,
    )


DAILY_FRAME_COLUMNS = [
    "emp_id", "name", "date", "chargeable_hours", "absence_hours", "other_hours",
    "net_available_hours", "utilization_rate", "available_capacity_hours",
    "is_working_day", "is_weekend", "is_public_holiday",
]


def daily_utilization_frame(employees, window, public_holidays=None):
    """One row per employee per day in the window, as a DataFrame."""
    rows = []
    for emp in employees:
        timeline = calculate_timeline_utilization(emp, window, public_holidays)
        for s in timeline.daily:
            rows.append({
                "emp_id": emp.emp_id,
                "name": emp.name,
                "date": s.date,
                "chargeable_hours": s.chargeable_hours,
                "absence_hours": s.absence_hours,
                "other_hours": s.other_hours,
                "net_available_hours": s.net_available_hours,
                "utilization_rate": s.utilization_rate,
                "available_capacity_hours": s.available_capacity_hours,
                "is_working_day": s.is_working_day,
                "is_weekend": s.is_weekend,
                "is_public_holiday": s.is_public_holiday,
            })
    return pd.DataFrame(rows, columns=DAILY_FRAME_COLUMNS)


# ── Period Consolidation ─────────────────────────────────────────────────────

def _can_merge(current, nxt):
    return (nxt.start <= current.end + timedelta(days=1)
            and nxt.utilization == current.utilization
            and nxt.hours_per_day == current.hours_per_day
            and nxt.status == current.status)


def consolidate_assignments(assignments):
    """Merge each job's assignments into the fewest contiguous periods.

    Jobs are keyed by name and returned in order of first appearance. Within a
    job, assignments are sorted by start and an assignment joins the open
    period when it starts no later than the day after the period ends and has
    the same utilisation, hours per day and status. A weekend between two
    otherwise identical assignments therefore keeps them apart.
    """
    jobs = {}
    sources = {}
    for a in assignments:
        job = jobs.get(a.job_name)
        if job is None:
            job = jobs[a.job_name] = ConsolidatedJob(
                job_name=a.job_name, job_code=a.job_code,
                category=a.category, status=a.status)
            sources[a.job_name] = []
        sources[a.job_name].append(a)
        job.total_utilization += a.utilization
        job.total_hours += a.hours_per_day
        if a.status == PROVISIONAL_STATUS:
            job.has_provisional = True

    for name, job in jobs.items():
        merged = []
        current = None
        for a in sorted(sources[name], key=lambda a: a.start):
            if current is not None and _can_merge(current, a):
                current.end = max(current.end, a.end)
                continue
            if current is not None:
                merged.append(current)
            current = ConsolidatedPeriod(
                start=a.start, end=a.end,
                hours_per_day=a.hours_per_day, utilization=a.utilization,
                status=a.status, category=a.category,
                has_provisional=a.status == PROVISIONAL_STATUS,
            )
        if current is not None:
            merged.append(current)
        job.periods = merged

    return list(jobs.values())


def group_jobs_by_category(jobs):
    """Split consolidated jobs into the display sections, in section order."""
    sections = {name: [] for name in CATEGORY_SECTIONS}
    for job in jobs:
        sections.get(job.category, sections["other"]).append(job)
    return sections


# ── Team Statistics ──────────────────────────────────────────────────────────

def calculate_team_stats(employees):
    """Roll employee summaries up into team counts, hours and a category breakdown."""
    stats = TeamStats(total=len(employees))
    for emp in employees:
        stats.total_chargeable_hours += emp.chargeable_hours
        stats.total_net_available_hours += emp.net_available_hours

        rate = emp.true_utilization_rate
        if rate == 0:
            stats.available += 1
        elif rate < 100:
            stats.partially_booked += 1
        else:
            stats.fully_booked += 1

        for a in emp.assignments:
            totals = stats.category_breakdown.setdefault(a.category, CategoryTotals())
            totals.count += 1
            totals.total_hours += a.hours_per_day or 0.0

    stats.overall_utilization_rate = _rate(stats.total_chargeable_hours,
                                           stats.total_net_available_hours)
    return stats


# ── Data Loading ─────────────────────────────────────────────────────────────

SUPPORTED_EXTENSIONS = (".xlsx", ".csv")


def _is_number(val):
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def _percent_columns(filepath):
    """Positions of first-sheet columns holding percent-formatted numbers."""
    wb = load_workbook(filepath, read_only=True, data_only=True)
    try:
        found = set()
        for row in wb.worksheets[0].iter_rows(min_row=2):
            for idx, cell in enumerate(row):
                if _is_number(cell.value) and "%" in (getattr(cell, "number_format", "") or ""):
                    found.add(idx)
        return found
    finally:
        wb.close()


def _scale_percent_cells(df, filepath):
    """Percent-formatted cells arrive as fractions (1.0); restore the shown value (100)."""
    for idx in sorted(_percent_columns(filepath)):
        if idx < len(df.columns):
            col = df.columns[idx]
            df[col] = df[col].map(lambda v: round(v * 100, 6) if _is_number(v) else v)
    return df


def load_records(filepath):
    """Load assignment rows from the first sheet of an .xlsx workbook or from a CSV.

    Columns are read by position (see RECORD_COLUMNS); the header row is skipped
    and fully blank rows are dropped. Numbers shown as percentages in the
    workbook are read as displayed, so a 100% cell gives 100.
    """
    ext = os.path.splitext(filepath)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type '{ext}'. Expected one of: "
                         f"{', '.join(SUPPORTED_EXTENSIONS)}")
    try:
        if ext == ".csv":
            df = pd.read_csv(filepath, dtype=str, keep_default_na=False)
        else:
            df = _scale_percent_cells(pd.read_excel(filepath, sheet_name=0, dtype=object),
                                      filepath)
    except Exception as e:
        print(f"  WARNING: Could not read {os.path.basename(filepath)}: {e}")
        return []
    if df.empty:
        return []
    if len(df.columns) < len(RECORD_COLUMNS):
        print(f"  WARNING: Expected {len(RECORD_COLUMNS)} columns, found {len(df.columns)}. "
              f"Missing columns are treated as blank.")

    records = []
    for row in df.itertuples(index=False, name=None):
        if not any(clean_str(v) for v in row):
            continue  # skip blank rows
        records.append(RawAssignmentRecord.from_row(row))
    return records


# ── Template Generation ─────────────────────────────────────────────────────

TEMPLATE_ROWS = [
    ["1001", "Martin", "Claire", "20451", "Client Portal Rebuild", "03/02/26", "03/13/26",
     100, "C", 80, "2026-03-02", "2026-03-13", "100%", 10, 80, 8],
    ["1001", "Martin", "Claire", "1200", "Annual Leave", "03/16/26", "03/20/26",
     100, "C", 40, "", "", "100%", 5, 40, 8],
    ["1002", "Dubois", "Hugo", "20877", "Data Warehouse", "03/02/26", "03/27/26",
     50, "P", 80, "2026-03-02", "2026-03-27", "50%", 20, 80, 4],
    ["1002", "Dubois", "Hugo", "9999999980", "Security Training", "03/09/26", "03/10/26",
     100, "C", 16, "", "", "100%", 2, 16, 8],
    ["1003", "Leroy", "Ines", "7777777777", "Pending Onboarding", "03/23/26", "04/03/26",
     100, "P", 80, "", "", "100%", 10, 80, 8],
]


def generate_template(output_path):
    """Create an example workbook with the expected assignment columns."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Assignments"

    header_font = Font(bold=True, color="FFFFFF", size=11)
    header_fill = PatternFill(start_color="1A1A2E", end_color="1A1A2E", fill_type="solid")
    header_align = Alignment(horizontal="center", vertical="center", wrap_text=True)
    thin = Side(style="thin", color="E0E0E0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)

    ws.append(RECORD_COLUMNS)
    for cell in ws[1]:
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = header_align
        cell.border = border
    for row in TEMPLATE_ROWS:
        ws.append(row)
        for cell in ws[ws.max_row]:
            cell.border = border

    for idx, name in enumerate(RECORD_COLUMNS, start=1):
        letter = ws.cell(row=1, column=idx).column_letter
        ws.column_dimensions[letter].width = max(12, len(name) + 4)
    ws.column_dimensions["E"].width = 28
    ws.freeze_panes = "A2"

    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    wb.save(output_path)
    print(f"Template created: {output_path}")
    print(f"  - Columns: {', '.join(RECORD_COLUMNS)}")
    print("  - Dates: YYYY-MM-DD, MM/DD/YY(YY) or DD.MM.YYYY; Parsed dates win when both are filled")
    print("\nEdit the file, then run again without --template to generate the charts.")


# ── Console Summary ──────────────────────────────────────────────────────────

def print_summary(employees, team_stats, window, public_holidays=None):
    """Print executive summary statistics to console."""
    working_days = count_working_days(window.start, window.end, public_holidays)
    skipped = sum(emp.skipped_records for emp in employees)

    print()
    print("=" * 60)
    print("  EXECUTIVE SUMMARY")
    print("=" * 60)
    print(f"  Window:        {window.start.strftime('%d %b %Y')} — "
          f"{window.end.strftime('%d %b %Y')} ({working_days} working days)")
    print(f"  Employees:     {team_stats.total} ({team_stats.available} available, "
          f"{team_stats.partially_booked} partially booked, {team_stats.fully_booked} fully booked)")
    print(f"  Utilisation:   {team_stats.overall_utilization_rate:.0f}% overall")

    over_allocated = []
    if employees:
        print()
        print("  In window:")
    for emp in employees:
        timeline = calculate_timeline_utilization(emp, window, public_holidays)
        print(f"    {emp.name or emp.emp_id}: {timeline.chargeable_hours:.1f}h chargeable / "
              f"{timeline.net_available_hours:.1f}h net ({timeline.utilization_rate:.0f}%), "
              f"{timeline.available_capacity_hours:.1f}h free")
        if timeline.is_over_allocated:
            over_allocated.append((emp, timeline))

    if over_allocated:
        print()
        print(f"  Over-allocated: {len(over_allocated)}")
        for emp, timeline in over_allocated:
            print(f"    WARNING: {emp.name or emp.emp_id} at {timeline.utilization_rate:.1f}%")

    if team_stats.category_breakdown:
        print()
        print("  By category:")
        for category in CATEGORIES:
            totals = team_stats.category_breakdown.get(category)
            if totals:
                print(f"    {category_label(category)}: {totals.count} "
                      f"assignment{'s' if totals.count != 1 else ''} ({totals.total_hours:.4g} h/day)")

    if skipped:
        print()
        print(f"  NOTE: {skipped} record{'s' if skipped != 1 else ''} had missing or "
              f"unparseable dates and were left out of the calculations")

    print("=" * 60)
    print()


# ── Chart: Availability Gantt ────────────────────────────────────────────────

def _draw_non_working_shading(ax, window, public_holidays=None):
    """Shade weekends grey and public holidays purple on a date-axis chart."""
    for day in window.days():
        x = mdates.date2num(_as_datetime(day))
        if is_public_holiday(day, public_holidays) and not is_weekend(day):
            ax.axvspan(x, x + 1, color=STYLE["holiday_color"], alpha=0.35, zorder=0)
        elif is_weekend(day):
            ax.axvspan(x, x + 1, color=STYLE["weekend_color"], alpha=0.25, zorder=0)


def render_gantt(employees, window, output_path, timeframe="month",
                 public_holidays=None, show_utilization=True, now=None):
    """Render consolidated assignment periods per employee and job."""
    apply_style()

    rows = []
    for emp in employees:
        for job in consolidate_assignments(emp.assignments):
            if any(window.overlaps(p.start, p.end) for p in job.periods):
                rows.append((emp, job))
    if not rows:
        print("  No assignments overlap the timeline window. Gantt not generated.")
        return

    n_rows = len(rows)
    fig_height = max(5, n_rows * 0.45 + 2.5)
    fig, ax = plt.subplots(figsize=(STYLE["fig_width"], fig_height), facecolor=STYLE["bg_color"])

    x_min = mdates.date2num(_as_datetime(window.start))
    x_max = mdates.date2num(_as_datetime(window.end)) + 1
    _draw_non_working_shading(ax, window, public_holidays)

    y_labels = []
    previous_emp = None
    for i, (emp, job) in enumerate(rows):
        y = n_rows - 1 - i
        shade = STYLE["row_shade_even"] if i % 2 == 0 else STYLE["row_shade_odd"]
        ax.axhspan(y - 0.5, y + 0.5, color=shade, alpha=0.5, zorder=0)
        if emp is not previous_emp and i > 0:
            ax.axhline(y + 0.5, color=STYLE["grid_color"], linewidth=1.0, zorder=1)
        previous_emp = emp

        for period in job.periods:
            start = max(period.start, window.start)
            end = min(period.end, window.end)
            if end < start:
                continue
            x = mdates.date2num(_as_datetime(start))
            width = (end - start).days + 1
            alpha = (STYLE["provisional_alpha"] if period.status == PROVISIONAL_STATUS
                     else STYLE["confirmed_alpha"])
            draw_rounded_bar(ax, x, y, width, STYLE["bar_height"],
                             assignment_color(period.category, period.utilization),
                             alpha=alpha)
            if show_utilization and width >= 3:
                ax.text(x + width / 2, y,
                        f"{period.hours_per_day:.1f}h ({period.utilization:.1f}%)",
                        ha="center", va="center", fontsize=STYLE["small_size"] - 1,
                        color="white", fontweight="bold", zorder=5)

        suffix = " (P)" if job.has_provisional else ""
        periods = f" · {len(job.periods)} periods" if len(job.periods) > 1 else ""
        y_labels.append(f"{emp.name or emp.emp_id}  |  {job.job_name}{suffix}{periods}")

    ax.set_yticks(range(n_rows))
    ax.set_yticklabels(list(reversed(y_labels)), fontsize=STYLE["tick_size"])
    ax.set_ylim(-0.6, n_rows - 0.4)
    ax.set_xlim(x_min, x_max)

    ticks = timeline_labels(window, timeframe)
    ax.set_xticks([mdates.date2num(_as_datetime(d)) for d, _ in ticks])
    fmt = "%a %d" if timeframe == "week" else "%d %b" if timeframe == "month" else "%b %Y"
    ax.set_xticklabels([d.strftime(fmt) for d, _ in ticks],
                       rotation=45, ha="right", fontsize=STYLE["tick_size"])
    draw_today_line(ax, window, n_rows - 0.45, now=now)

    present = []
    for _, job in rows:
        if job.category not in present:
            present.append(job.category)
    handles = [mpatches.Patch(facecolor=assignment_color(c, 100), edgecolor="white",
                              label=category_label(c))
               for c in CATEGORIES if c in present]
    handles.append(mpatches.Patch(facecolor=STYLE["holiday_color"], alpha=0.35,
                                  edgecolor=STYLE["holiday_edge_color"], label="Public holiday"))
    ax.legend(handles=handles, loc="upper center", bbox_to_anchor=(0.5, -0.12),
              ncol=min(len(handles), 5), fontsize=STYLE["small_size"], framealpha=0.9,
              edgecolor=STYLE["grid_color"], fancybox=True)

    style_axes(ax, title="Assignments by Employee", show_grid_x=True)
    subtitle = f"{window.start.strftime('%d %b %Y')} — {window.end.strftime('%d %b %Y')}"
    add_header_footer(fig, "Employee Availability", subtitle)

    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    fig.savefig(output_path, dpi=STYLE["dpi"], bbox_inches="tight", facecolor=STYLE["bg_color"])
    plt.close(fig)
    print(f"  Gantt chart saved: {output_path}")


# ── Chart: Daily Team Capacity ───────────────────────────────────────────────

def render_daily_capacity(employees, window, output_path, public_holidays=None):
    """Render team chargeable and absence hours per working day against net availability."""
    apply_style()

    frame = daily_utilization_frame(employees, window, public_holidays)
    working = frame[frame["is_working_day"].astype(bool)] if not frame.empty else frame
    if working.empty:
        print("  No working days in the timeline window. Daily capacity chart not generated.")
        return

    per_day = working.groupby("date", sort=True)[
        ["chargeable_hours", "absence_hours", "net_available_hours"]].sum()
    days = list(per_day.index)
    x = np.arange(len(days))
    chargeable = per_day["chargeable_hours"].to_numpy()
    absence = per_day["absence_hours"].to_numpy()
    net = per_day["net_available_hours"].to_numpy()

    fig, ax = plt.subplots(figsize=(max(14, len(days) * 0.35), 8), facecolor=STYLE["bg_color"])

    over = chargeable > net
    colors = [STYLE["over_capacity_color"] if o else assignment_color("chargeable", 75) for o in over]
    ax.bar(x, chargeable, 0.8, color=colors, alpha=0.85, edgecolor="white",
           linewidth=0.5, label="Chargeable", zorder=3)
    ax.bar(x, absence, 0.8, bottom=chargeable, color=CATEGORY_COLORS["absence"],
           alpha=0.6, edgecolor="white", linewidth=0.5, label="Absence / LOA", zorder=3)
    ax.plot(x, net, color=STYLE["capacity_line_color"], linewidth=2, linestyle="--",
            marker="o", markersize=3, label="Net available", zorder=5)
    ax.axhline(len(employees) * HOURS_PER_DAY, color=STYLE["text_muted"],
               linewidth=1, linestyle=":", label=f"{HOURS_PER_DAY}h x {len(employees)}", zorder=4)

    if len(days) <= 31:
        for i in range(len(days)):
            pct = _rate(chargeable[i], net[i])
            if chargeable[i] > 0:
                color = STYLE["over_capacity_color"] if pct > 100 else STYLE["text_secondary"]
                ax.text(i, max(chargeable[i] + absence[i], net[i]) + 0.5, f"{pct:.0f}%",
                        ha="center", fontsize=5.5, color=color,
                        fontweight="bold" if pct > 100 else "normal")

    step = max(1, len(days) // 30)
    ax.set_xticks(x[::step])
    ax.set_xticklabels([d.strftime("%d %b") for d in days[::step]],
                       rotation=45, ha="right", fontsize=STYLE["tick_size"])
    top = max(float((chargeable + absence).max()), float(net.max()), len(employees) * HOURS_PER_DAY)
    ax.set_ylim(0, max(top, 1) * 1.2)
    ax.legend(loc="upper right", fontsize=STYLE["small_size"], framealpha=0.9,
              edgecolor=STYLE["grid_color"], fancybox=True)

    style_axes(ax, title="Daily Team Capacity (working days)", ylabel="Hours", show_grid_y=True)
    subtitle = f"{window.start.strftime('%d %b %Y')} — {window.end.strftime('%d %b %Y')}"
    add_header_footer(fig, "Team Capacity", subtitle)

    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    fig.savefig(output_path, dpi=STYLE["dpi"], bbox_inches="tight", facecolor=STYLE["bg_color"])
    plt.close(fig)
    print(f"  Daily capacity chart saved: {output_path}")


# ── Main ─────────────────────────────────────────────────────────────────────

def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Employee Availability Dashboard — utilisation charts and summary from Excel/CSV assignments"
    )
    parser.add_argument(
        "--template", action="store_true",
        help="Generate an example Excel input file"
    )
    parser.add_argument(
        "--input", default=DEFAULT_INPUT,
        help="Path to .xlsx or .csv input file (default: assignments.xlsx)"
    )
    parser.add_argument(
        "--outdir", default=DEFAULT_OUTDIR,
        help="Output directory for charts and summary (default: output/)"
    )
    parser.add_argument(
        "--timeframe", default="month", choices=TIMEFRAMES,
        help="Timeline window around today (default: month). 'custom' needs --from and --to"
    )
    parser.add_argument(
        "--from", dest="date_from", default=None,
        help="Custom window start (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--to", dest="date_to", default=None,
        help="Custom window end (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--charts", default=["all"], nargs="+",
        choices=["all", "gantt", "daily", "none"],
        help="Which charts to generate (default: all)"
    )
    parser.add_argument(
        "--no-labels", action="store_true",
        help="Hide hours/utilisation labels on Gantt bars"
    )
    parser.add_argument(
        "--csv", action="store_true",
        help="Also export the day-by-day utilisation table as CSV"
    )
    args = parser.parse_args(argv)

    if args.template:
        generate_template(args.input)
        return

    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}")
        print("Run with --template first to create an example file.")
        sys.exit(1)

    for flag, value in (("--from", args.date_from), ("--to", args.date_to)):
        if value and normalize_date(value) is None:
            print(f"  ERROR: Invalid {flag} date '{value}'. Use YYYY-MM-DD format.")
            sys.exit(1)
    if args.timeframe == "custom" and not (args.date_from and args.date_to):
        print("  NOTE: --timeframe custom needs both --from and --to; using month instead.")

    print(f"Loading data from: {args.input}")
    try:
        records = load_records(args.input)
    except ValueError as e:
        print(f"  ERROR: {e}")
        sys.exit(1)
    STYLE["_data_source"] = os.path.basename(args.input)
    print(f"  Records: {len(records)}")
    if not records:
        print("  WARNING: No records found. All figures will be zero.")

    employees = build_employees(records)
    window = resolve_timeline(args.timeframe, custom_start=args.date_from, custom_end=args.date_to)
    team_stats = calculate_team_stats(employees)
    print(f"  Employees: {len(employees)}")
    print(f"  Window: {window.start.isoformat()} to {window.end.isoformat()} ({window.day_count} days)")

    summary_capture = io.StringIO()
    _orig_stdout = sys.stdout
    sys.stdout = _TeeWriter(_orig_stdout, summary_capture)
    try:
        print_summary(employees, team_stats, window)
    finally:
        sys.stdout = _orig_stdout

    os.makedirs(args.outdir, exist_ok=True)
    charts = args.charts
    gen_all = "all" in charts
    output_files = []

    if gen_all or "gantt" in charts:
        gantt_path = os.path.join(args.outdir, "availability_gantt.png")
        render_gantt(employees, window, gantt_path, timeframe=args.timeframe,
                     show_utilization=not args.no_labels)
        if os.path.exists(gantt_path):
            output_files.append(gantt_path)

    if gen_all or "daily" in charts:
        daily_path = os.path.join(args.outdir, "daily_capacity.png")
        render_daily_capacity(employees, window, daily_path)
        if os.path.exists(daily_path):
            output_files.append(daily_path)

    if args.csv:
        csv_path = os.path.join(args.outdir, "daily_utilization.csv")
        daily_utilization_frame(employees, window).to_csv(csv_path, index=False)
        output_files.append(csv_path)

    summary_path = os.path.join(args.outdir, "summary.txt")
    with open(summary_path, "w", encoding="utf-8") as sf:
        sf.write(summary_capture.getvalue())
    output_files.append(summary_path)

    print()
    print("  Output:")
    for f in output_files:
        print(f"    {os.path.abspath(f)}")
    print("\nDone.")


if __name__ == "__main__":
    main()
