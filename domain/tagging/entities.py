"""
Named-entity tag tables: notable people, historical events and organizations.

A name matches when it appears in the text as a whole word (case-insensitive);
every tag attached to a matched name is applied.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

PEOPLE_TAGS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Samuel Gompers": ("Organizing",),
        "Eugene Debs": ("Socialism & Left Politics",),
        "Eugene V. Debs": ("Socialism & Left Politics",),
        "Mother Jones": ("Mining", "Organizing", "Child Labor"),
        "Mary Harris Jones": ("Mining", "Organizing", "Child Labor"),
        "Joe Hill": ("Socialism & Left Politics", "Labor Culture & Arts"),
        "Big Bill Haywood": ("Socialism & Left Politics", "Mining"),
        "Cesar Chavez": ("Agriculture & Farm Work", "Immigration", "Organizing"),
        "Dolores Huerta": ("Agriculture & Farm Work", "Immigration", "Women & Gender", "Organizing"),
        "A. Philip Randolph": ("Civil Rights & Race", "Auto & Transportation", "Organizing"),
        "Walter Reuther": ("Auto & Transportation", "Organizing"),
        "John L. Lewis": ("Mining", "Organizing"),
        "Frances Perkins": ("Labor Law & Legislation", "Women & Gender"),
        "Harry Bridges": ("Maritime & Dockworkers", "Organizing"),
        "Emma Goldman": ("Socialism & Left Politics",),
        "Clara Lemlich": ("Textiles & Garment", "Women & Gender", "Strikes & Lockouts"),
        "Rose Schneiderman": ("Textiles & Garment", "Women & Gender", "Worker Safety & Health"),
        "Lucy Parsons": ("Socialism & Left Politics", "Civil Rights & Race"),
        "Elizabeth Gurley Flynn": ("Socialism & Left Politics", "Women & Gender"),
        "Pete Seeger": ("Labor Culture & Arts",),
        "Woody Guthrie": ("Labor Culture & Arts",),
        "Florence Reece": ("Mining", "Labor Culture & Arts", "Women & Gender"),
        "Sarah Bagley": ("Textiles & Garment", "Women & Gender"),
        "Mary McLeod Bethune": ("Civil Rights & Race", "Education & Teachers"),
        "Martin Luther King": ("Civil Rights & Race",),
        "Coretta Scott King": ("Civil Rights & Race", "Women & Gender"),
        "Bayard Rustin": ("Civil Rights & Race",),
        "Sidney Hillman": ("Textiles & Garment", "Politics & Elections"),
        "George Meany": ("Organizing",),
        "Lane Kirkland": ("Organizing", "International Solidarity"),
        "John Sweeney": ("Organizing", "Service & Retail"),
        "Richard Trumka": ("Mining", "Organizing"),
        "Liz Shuler": ("Organizing", "Women & Gender"),
        "Mary Kay Henry": ("Healthcare", "Organizing", "Women & Gender"),
        "Karen Lewis": ("Education & Teachers", "Civil Rights & Race"),
        "Randi Weingarten": ("Education & Teachers", "Organizing"),
        "Sara Nelson": ("Organizing", "Auto & Transportation"),
        "Anne Feeney": ("Labor Culture & Arts",),
        "Utah Phillips": ("Labor Culture & Arts", "Socialism & Left Politics"),
        "Si Kahn": ("Labor Culture & Arts", "Organizing"),
        "Larry Penn": ("Labor Culture & Arts",),
    }
)

EVENT_TAGS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Haymarket": ("Strikes & Lockouts", "Socialism & Left Politics"),
        "Triangle": ("Textiles & Garment", "Women & Gender", "Worker Safety & Health"),
        "Triangle Shirtwaist": ("Textiles & Garment", "Women & Gender", "Worker Safety & Health"),
        "Pullman Strike": ("Auto & Transportation", "Strikes & Lockouts"),
        "Homestead": ("Steel & Manufacturing", "Strikes & Lockouts"),
        "Ludlow Massacre": ("Mining", "Strikes & Lockouts"),
        "Ludlow": ("Mining", "Strikes & Lockouts"),
        "Bread and Roses": ("Textiles & Garment", "Women & Gender", "Strikes & Lockouts"),
        "Lawrence Strike": ("Textiles & Garment", "Strikes & Lockouts"),
        "Flint Sit-Down": ("Auto & Transportation", "Strikes & Lockouts"),
        "Memphis Sanitation": ("Public Sector", "Civil Rights & Race", "Strikes & Lockouts"),
        "PATCO": ("Strikes & Lockouts", "Auto & Transportation"),
        "Taft-Hartley": ("Labor Law & Legislation",),
        "Wagner Act": ("Labor Law & Legislation",),
        "New Deal": ("Labor Law & Legislation", "Politics & Elections"),
        "Lowell Mill": ("Textiles & Garment", "Women & Gender"),
        "Matewan": ("Mining", "Strikes & Lockouts"),
        "Battle of Blair Mountain": ("Mining", "Strikes & Lockouts"),
        "Blair Mountain": ("Mining", "Strikes & Lockouts"),
        "Lattimer Massacre": ("Mining", "Immigration"),
        "Harlan County": ("Mining", "Strikes & Lockouts"),
        "Delano Grape": ("Agriculture & Farm Work", "Strikes & Lockouts", "Immigration"),
        "March on Washington": ("Civil Rights & Race",),
        "May Day": ("International Solidarity",),
        "Cripple Creek": ("Mining", "Strikes & Lockouts"),
        "Everett Massacre": ("Socialism & Left Politics",),
        "Republic Steel": ("Steel & Manufacturing", "Strikes & Lockouts"),
        "Little Steel": ("Steel & Manufacturing", "Strikes & Lockouts"),
        "Great Railroad Strike": ("Auto & Transportation", "Strikes & Lockouts"),
        "Uprising of the 20,000": ("Textiles & Garment", "Women & Gender", "Strikes & Lockouts"),
    }
)

ORG_TAGS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "AFL-CIO": ("Organizing",),
        "AFL": ("Organizing",),
        "CIO": ("Organizing",),
        "IWW": ("Socialism & Left Politics",),
        "UMWA": ("Mining",),
        "UMW": ("Mining",),
        "United Mine Workers": ("Mining",),
        "UAW": ("Auto & Transportation",),
        "United Auto Workers": ("Auto & Transportation",),
        "ILGWU": ("Textiles & Garment", "Women & Gender"),
        "UFW": ("Agriculture & Farm Work", "Immigration"),
        "United Farm Workers": ("Agriculture & Farm Work", "Immigration"),
        "SEIU": ("Service & Retail", "Healthcare"),
        "AFSCME": ("Public Sector",),
        "AFT": ("Education & Teachers",),
        "NEA": ("Education & Teachers",),
        "IBEW": ("Construction",),
        "Teamsters": ("Auto & Transportation",),
        "IBT": ("Auto & Transportation",),
        "ILWU": ("Maritime & Dockworkers",),
        "ILA": ("Maritime & Dockworkers",),
        "SAG-AFTRA": ("Entertainment & Media",),
        "WGA": ("Entertainment & Media",),
        "IATSE": ("Entertainment & Media",),
        "UNITE HERE": ("Service & Retail", "Textiles & Garment"),
        "NLRB": ("Labor Law & Legislation",),
        "OSHA": ("Worker Safety & Health",),
    }
)


class EntityMatcher:
    """Whole-word, case-insensitive matcher over one entity-tag table."""

    def __init__(self, table: Mapping[str, tuple[str, ...]]) -> None:
        self._entries: tuple[tuple[str, re.Pattern[str], tuple[str, ...]], ...] = tuple(
            (name, re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE), tags) for name, tags in table.items()
        )

    def matched_names(self, text: str) -> list[str]:
        """Names from the table found in text, in table order."""
        return [name for name, pattern, _ in self._entries if pattern.search(text)]

    def match(self, text: str) -> set[str]:
        """Union of the tags of every name found in text."""
        tags: set[str] = set()
        for _, pattern, entity_tags in self._entries:
            if pattern.search(text):
                tags.update(entity_tags)
        return tags


PEOPLE = EntityMatcher(PEOPLE_TAGS)
EVENTS = EntityMatcher(EVENT_TAGS)
ORGANIZATIONS = EntityMatcher(ORG_TAGS)
