"""Preset time ranges offered by the time picker and their labels."""

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from dashtime.core.types import TimeOption


@dataclass(frozen=True)
class Span:
    """Display name of a range unit and its optional picker section."""

    display: str
    section: int | None = None


# Unit symbol -> singular display name used for "Last N <unit>" labels
SPANS: MappingProxyType[str, Span] = MappingProxyType(
    {
        "s": Span("segundo"),
        "m": Span("minuto"),
        "h": Span("hora"),
        "d": Span("dia"),
        "w": Span("semana"),
        "M": Span("mês"),
        "y": Span("ano"),
    }
)

RANGE_OPTIONS: tuple[TimeOption, ...] = (
    TimeOption(from_="now/d", to="now/d", display="Hoje"),
    TimeOption(from_="now/d", to="now", display="Hoje até agora"),
    TimeOption(from_="now/w", to="now/w", display="Esta semana"),
    TimeOption(from_="now/w", to="now", display="Esta semana até agora"),
    TimeOption(from_="now/M", to="now/M", display="Este mês"),
    TimeOption(from_="now/M", to="now", display="Este mês até agora"),
    TimeOption(from_="now/y", to="now/y", display="Este ano"),
    TimeOption(from_="now/y", to="now", display="Este ano até agora"),
    TimeOption(from_="now-1d/d", to="now-1d/d", display="Ontem"),
    TimeOption(from_="now-2d/d", to="now-2d/d", display="Anteontem"),
    TimeOption(from_="now-7d/d", to="now-7d/d", display="Este dia na semana passada"),
    TimeOption(from_="now-1w/w", to="now-1w/w", display="Semana anterior"),
    TimeOption(from_="now-1M/M", to="now-1M/M", display="Mês anterior"),
    TimeOption(from_="now-1Q/fQ", to="now-1Q/fQ", display="Trimestre fiscal anterior"),
    TimeOption(from_="now-1y/y", to="now-1y/y", display="Ano anterior"),
    TimeOption(from_="now-1y/fy", to="now-1y/fy", display="Ano fiscal anterior"),
    TimeOption(from_="now-5m", to="now", display="Últimos 5 minutos"),
    TimeOption(from_="now-15m", to="now", display="Últimos 15 minutos"),
    TimeOption(from_="now-30m", to="now", display="Últimos 30 minutos"),
    TimeOption(from_="now-1h", to="now", display="Última 1 hora"),
    TimeOption(from_="now-3h", to="now", display="Últimas 3 horas"),
    TimeOption(from_="now-6h", to="now", display="Últimas 6 horas"),
    TimeOption(from_="now-12h", to="now", display="Últimas 12 horas"),
    TimeOption(from_="now-24h", to="now", display="Últimas 24 horas"),
    TimeOption(from_="now-2d", to="now", display="Últimos 2 dias"),
    TimeOption(from_="now-7d", to="now", display="Últimos 7 dias"),
    TimeOption(from_="now-30d", to="now", display="Últimos 30 dias"),
    TimeOption(from_="now-90d", to="now", display="Últimos 90 dias"),
    TimeOption(from_="now-6M", to="now", display="Últimos 6 meses"),
    TimeOption(from_="now-1y", to="now", display="Último 1 ano"),
    TimeOption(from_="now-2y", to="now", display="Últimos 2 anos"),
    TimeOption(from_="now-5y", to="now", display="Últimos 5 anos"),
    TimeOption(from_="now/fQ", to="now", display="Este trimestre fiscal até agora"),
    TimeOption(from_="now/fQ", to="now/fQ", display="Este trimestre fiscal"),
    TimeOption(from_="now/fy", to="now", display="Este ano fiscal até agora"),
    TimeOption(from_="now/fy", to="now/fy", display="Este ano fiscal"),
)

# Future ranges: recognised and labelled, but not listed in the picker
HIDDEN_RANGE_OPTIONS: tuple[TimeOption, ...] = (
    TimeOption(from_="now", to="now+1m", display="Próximo minuto"),
    TimeOption(from_="now", to="now+5m", display="Próximos 5 minutos"),
    TimeOption(from_="now", to="now+15m", display="Próximos 15 minutos"),
    TimeOption(from_="now", to="now+30m", display="Próximos 30 minutos"),
    TimeOption(from_="now", to="now+1h", display="Próxima hora"),
    TimeOption(from_="now", to="now+3h", display="Próximas 3 horas"),
    TimeOption(from_="now", to="now+6h", display="Próximas 6 horas"),
    TimeOption(from_="now", to="now+12h", display="Próximas 12 horas"),
    TimeOption(from_="now", to="now+24h", display="Próximas 24 horas"),
    TimeOption(from_="now", to="now+2d", display="Próximos 2 dias"),
    TimeOption(from_="now", to="now+7d", display="Próximos 7 dias"),
    TimeOption(from_="now", to="now+30d", display="Próximos 30 dias"),
    TimeOption(from_="now", to="now+90d", display="Próximos 90 dias"),
    TimeOption(from_="now", to="now+6M", display="Próximos 6 meses"),
    TimeOption(from_="now", to="now+1y", display="Próximo ano"),
    TimeOption(from_="now", to="now+2y", display="Próximos 2 anos"),
    TimeOption(from_="now", to="now+5y", display="Próximos 5 anos"),
)


def build_range_index(
    *groups: Iterable[TimeOption],
) -> MappingProxyType[tuple[str, str], TimeOption]:
    """
    Index presets by their (from, to) pair.

    Raises:
        ValueError: If two presets share the same pair
    """
    index: dict[tuple[str, str], TimeOption] = {}
    for group in groups:
        for option in group:
            key = (option.from_, option.to)
            if key in index:
                raise ValueError(f"Duplicate preset range: {option.from_} to {option.to}")
            index[key] = option
    return MappingProxyType(index)


RANGE_INDEX = build_range_index(RANGE_OPTIONS, HIDDEN_RANGE_OPTIONS)


def find_preset(from_: str, to: str) -> TimeOption | None:
    """Return the preset for an exact (from, to) pair, if any."""
    return RANGE_INDEX.get((from_, to))
