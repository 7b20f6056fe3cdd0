"""
Keyword rules for auto-tagging.

Each rule pairs a canonical tag with regex patterns matched against the
combined title, description, creator and metadata text. Patterns are
conservative: better to miss a tag than to apply a wrong one. Acronyms are
matched case-sensitively; everything else ignores case.
"""

import re
from dataclasses import dataclass


def _i(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def _c(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


@dataclass(frozen=True)
class TagRule:
    """A canonical tag and the text patterns that imply it."""

    tag: str
    patterns: tuple[re.Pattern[str], ...]

    def matches(self, text: str) -> bool:
        # any() stops at the first matching pattern
        return any(p.search(text) for p in self.patterns)


TAG_RULES: tuple[TagRule, ...] = (
    # Theme
    TagRule(
        "Strikes & Lockouts",
        (
            _i(r"\bstrike[sd]?\b"),
            _i(r"\bstrik(ing|ers?)\b"),
            _i(r"\blockout[s]?\b"),
            _i(r"\bwalkout[s]?\b"),
            _i(r"\bwork stoppage"),
            _i(r"\bpicket(ed|ing|s|ers?)?\b"),
            _i(r"\bwildcat strike"),
            _i(r"\bgeneral strike"),
            _i(r"\bsit-down strike"),
            _i(r"\bsitdown strike"),
        ),
    ),
    TagRule(
        "Organizing",
        (
            _i(r"\bunion(iz|is)(e[ds]?|ing|ation)\b"),
            _i(r"\borganiz(e[ds]?|ing|ers?)\b"),
            _i(r"\bunion drive"),
            _i(r"\bunion election"),
            _i(r"\bcollective action"),
            _i(r"\bunion recognition"),
            _i(r"\bcard check"),
            _i(r"\bunion campaign"),
            _c(r"\bNLRB\b"),
            _i(r"\bshop steward"),
        ),
    ),
    TagRule(
        "Collective Bargaining",
        (
            _i(r"\bcollective bargain"),
            _i(r"\bcontract negoti"),
            _i(r"\blabor negoti"),
            _i(r"\bbargaining (unit|agreement|table|session)"),
            _i(r"\bwage negoti"),
        ),
    ),
    TagRule(
        "Labor Law & Legislation",
        (
            _i(r"\b(Wagner|Taft.Hartley|Norris.LaGuardia|NLRA|FLSA|OSHA|ERISA)\b"),
            _i(r"\blabor (law|legislation|bill|act|statute)"),
            _i(r"\bright.to.work\b"),
            _i(r"\bminimum wage (law|bill|act|legislation)"),
            _i(r"\beight.hour (day|law|movement)"),
            _i(r"\bfair labor standards"),
            _i(r"\boccupational safety"),
            _i(r"\bworkers.? comp(ensation)?\b"),
            _i(r"\bchild labor law"),
            _i(r"\bSupreme Court.{0,200}\b(labor|union|worker|wage)"),
            _i(r"\b(labor|union|worker|wage).{0,200}\bSupreme Court"),
        ),
    ),
    TagRule(
        "Wages & Benefits",
        (
            _i(r"\bminimum wage\b"),
            _i(r"\bwage (cut|increase|raise|theft|gap|disparity)"),
            _i(r"\bpay (cut|raise|equity|gap|disparity)"),
            _i(r"\bpension[s]?\b"),
            _i(r"\bequal pay\b"),
            _i(r"\bliving wage"),
            _i(r"\bovertime (pay|rule|law)"),
        ),
    ),
    TagRule(
        "Working Conditions",
        (
            _i(r"\bworking condition"),
            _i(r"\bsweatshop"),
            _i(r"\bexploit(ed|ation|ing)\b"),
            _i(r"\bforced labor"),
            _i(r"\boverwork"),
            _i(r"\b(long|excessive) hours"),
        ),
    ),
    TagRule(
        "Worker Safety & Health",
        (
            _i(r"\b(mine|mining|factory|workplace|industrial) (disaster|explosion|accident|fire|collapse|tragedy)"),
            _i(r"\b(disaster|explosion|accident|fire|collapse|tragedy).{0,30}(mine|mining|factory|workplace|mill|plant)"),
            _i(r"\bblack lung"),
            _i(r"\basbestosis"),
            _i(r"\boccupational (disease|health|illness|hazard)"),
            _i(r"\bworkplace (safety|death|injur|fatality)"),
            _i(r"\bkill(s|ed)?\s+\d+\s+(miners?|workers?|employees?)"),
            _i(r"\d+\s+(miners?|workers?|employees?)\s+(killed|died|dead|perish)"),
            _c(r"\bOSHA\b"),
            _i(r"\bsafety (violation|infraction|regulation|standard)"),
        ),
    ),
    TagRule(
        "Child Labor",
        (
            _i(r"\bchild labor"),
            _i(r"\bchild worker"),
            _i(r"\bchild(ren)?.{0,20}(factor|mill|mine|sweatshop)"),
            _i(r"\b(newsboy|newsie|breaker boy)"),
        ),
    ),
    TagRule(
        "Unemployment",
        (
            _i(r"\bunemploy(ed|ment)\b"),
            _i(r"\bjobless"),
            _i(r"\blayoff[s]?\b"),
            _i(r"\blaid off\b"),
            _i(r"\bplant clos(e[ds]?|ing|ure)"),
            _i(r"\bfactory clos(e[ds]?|ing|ure)"),
        ),
    ),
    TagRule(
        "Automation & Technology",
        (
            _i(r"\bautomati(on|ed|ze|zing)\b"),
            _i(r"\bmechaniz(e[ds]?|ation|ing)\b"),
            _i(r"\brobot(s|ics|ization)?\b"),
            _i(r"\bartificial intelligence\b"),
            _i(r"\bgig economy"),
            _i(r"\bapp.based (work|driver|deliver)"),
        ),
    ),
    TagRule(
        "Globalization & Outsourcing",
        (
            _i(r"\bglobaliz(e[ds]?|ation|ing)\b"),
            _i(r"\boutsourc(e[ds]?|ing)\b"),
            _i(r"\boffshore|offshoring"),
            _i(r"\bfree trade\b"),
            _c(r"\bNAFTA\b"),
            _c(r"\bTPP\b"),
            _i(r"\btrade (agreement|deal|pact|treaty)"),
            _i(r"\bsweatshop.{0,20}(overseas|abroad|foreign)"),
        ),
    ),
    TagRule(
        "Labor Culture & Arts",
        (
            _i(r"\blabor (song|music|poem|poetry|art|theater|theatre|mural|poster|cartoon)"),
            _i(r"\b(song|music|poem|poetry|art|theater|theatre|mural|poster|cartoon).{0,20}(labor|union|worker|working class)"),
            _i(r"\bprotest song"),
            _i(r"\blabor (chorus|choir|band)"),
            _i(r"\bfolk (song|music|singer).{0,30}(labor|union|worker|strike)"),
        ),
    ),
    TagRule(
        "International Solidarity",
        (
            _i(r"\binternational (solidarity|brotherhood|worker|labor day)"),
            _i(r"\bsolidarity.{0,20}(international|global|worldwide|across borders)"),
            _i(r"\bMay Day\b"),
            _c(r"\bILO\b"),
            _i(r"\bInternational Labour"),
        ),
    ),
    # Industry
    TagRule(
        "Mining",
        (
            _i(r"\bmin(e[ds]?|ing|ers?)\b"),
            _i(r"\bcoal\b"),
            _c(r"\bUMW(A)?\b"),
            _i(r"\bUnited Mine Workers"),
            _i(r"\banthracite"),
            _i(r"\bbituminous"),
            _i(r"\bgold (mine|rush|miners)"),
            _i(r"\bcopper mine"),
            _i(r"\bzinc"),
            _i(r"\bLudlow\b"),
            _i(r"\bMother Jones\b"),
            _i(r"\bJohn L\.?\s*Lewis\b"),
        ),
    ),
    TagRule(
        "Steel & Manufacturing",
        (
            _i(r"\bsteel(worker)?s?\b"),
            _i(r"\bironwork(er)?s?\b"),
            _i(r"\bfactor(y|ies)\b"),
            _i(r"\bmanufactur(e[ds]?|ing|ers?)\b"),
            _i(r"\bmill(s|workers?)?\b(?!ion)"),
            _i(r"\bassembly line"),
            _c(r"\bUSW(A)?\b"),
            _i(r"\bUnited Steelworkers"),
            _i(r"\bHomestead (Strike|Steel)"),
            _i(r"\bCarnegie Steel"),
        ),
    ),
    TagRule(
        "Textiles & Garment",
        (
            _i(r"\btextile"),
            _i(r"\bgarment"),
            _i(r"\bclothing workers"),
            _i(r"\bneedle trade"),
            _c(r"\bILGWU\b"),
            _c(r"\bACTWU\b"),
            _i(r"\bUNITE HERE\b"),
            _i(r"\bTriangle (Shirtwaist|Factory|Fire)"),
            _i(r"\bBread and Roses"),
            _i(r"\bLawrence.{0,20}(strike|textile|mill)"),
            _i(r"\bLowell.{0,20}(mill|factory|girl)"),
        ),
    ),
    TagRule(
        "Agriculture & Farm Work",
        (
            _i(r"\bfarmworker"),
            _i(r"\bfarm worker"),
            _i(r"\bagricult(ure|ural)\b"),
            _i(r"\bharvest(er|ing|s)?\b"),
            _c(r"\bUFW\b"),
            _i(r"\bUnited Farm Workers"),
            _i(r"\bCesar\s+Chavez"),
            _i(r"\bDolores\s+Huerta"),
            _i(r"\bgrape (boycott|strike)"),
            _i(r"\bDelano"),
            _i(r"\bsharecropper"),
            _i(r"\btenant farmer"),
            _i(r"\bSouthern Tenant Farmers"),
            _i(r"\bmigrant (farm|field|labor)"),
        ),
    ),
    TagRule(
        "Auto & Transportation",
        (
            _c(r"\bUAW\b"),
            _i(r"\bUnited Auto(mobile)? Workers"),
            _i(r"\bauto(mobile)? (worker|plant|factory|industry)"),
            _i(r"\brailroad"),
            _i(r"\brailway"),
            _i(r"\bBrotherhood of (Railroad|Locomotive|Railway)"),
            _i(r"\bteamster"),
            _i(r"\btruck(er|ing|driver)"),
            _i(r"\btransit (worker|union|strike)"),
            _i(r"\bPullman"),
            _i(r"\bFlint sit.down"),
            _i(r"\bGeneral Motors.{0,20}(strike|Flint|UAW)"),
        ),
    ),
    TagRule(
        "Construction",
        (
            _i(r"\bconstruction (worker|trade|union|site|industry)"),
            _i(r"\bbuilding trades"),
            _i(r"\bcarpenter[s]?\b"),
            _i(r"\belectrician[s]?\b"),
            _i(r"\bplumber[s]?\b"),
            _i(r"\bironworker[s]?\b"),
            _i(r"\bbricklayer"),
            _c(r"\bIBEW\b"),
            _i(r"\bhard hat"),
        ),
    ),
    TagRule(
        "Public Sector",
        (
            _i(r"\bpublic (sector|employee|worker|servant)"),
            _i(r"\bgovernment (worker|employee|union)"),
            _i(r"\bcivil serv(ant|ice)"),
            _c(r"\bAFSCME\b"),
            _c(r"\bAFGE\b"),
            _i(r"\bpostal (worker|union|strike|service)"),
            _i(r"\bfirefighter"),
            _i(r"\bpolic(e|ing).{0,20}(union|strike|officer)"),
            _i(r"\bsanitation (worker|strike)"),
            _i(r"\bMemphis.{0,20}(sanitation|strike|1968)"),
        ),
    ),
    TagRule(
        "Education & Teachers",
        (
            _i(r"\bteacher[s]?\b"),
            _i(r"\beducator[s]?\b"),
            _i(r"\bschool (strike|teacher|worker|board|bus)"),
            _c(r"\bAFT\b"),
            _c(r"\bNEA\b"),
            _i(r"\b(teachers?|education).{0,20}union"),
            _i(r"\bunion.{0,20}(teachers?|education)"),
            _i(r"\bprofessor[s]?\b"),
            _i(r"\bgraduate (student|assistant|worker)"),
        ),
    ),
    TagRule(
        "Healthcare",
        (
            _i(r"\bnurs(e[s]?|ing)\b"),
            _i(r"\bhospital (worker|strike|union|employee)"),
            _i(r"\bhealthcare (worker|union|strike)"),
            _i(r"\bhealth care (worker|union|strike)"),
            _i(r"\b(doctor|physician|medical).{0,20}(union|strike|organiz)"),
            _i(r"\bSEIU.{0,20}(health|hospital|nurs)"),
            _i(r"\bNational Nurses"),
        ),
    ),
    TagRule(
        "Entertainment & Media",
        (
            _c(r"\bSAG\b"),
            _c(r"\bAFTRA\b"),
            _i(r"\bSAG.AFTRA"),
            _c(r"\bWGA\b"),
            _i(r"\bWriters Guild"),
            _i(r"\bScreen Actors"),
            _c(r"\bDGA\b"),
            _c(r"\bIATSE\b"),
            _i(r"\bHollywood.{0,20}(strike|union|labor)"),
            _i(r"\bbroadcast(er|ing)?.{0,20}(union|strike|worker)"),
            _i(r"\bnewspaper (guild|union|strike|worker)"),
            _i(r"\bjournalist[s]?.{0,20}(union|strike|guild)"),
        ),
    ),
    TagRule(
        "Service & Retail",
        (
            _i(r"\bservice (worker|employee|industry|sector|union)"),
            _i(r"\bretail (worker|employee|clerk|union)"),
            _i(r"\bwaiter|waitress|waitstaff"),
            _i(r"\bjanitor"),
            _i(r"\bcustodian"),
            _i(r"\bhousekeep(er|ing)"),
            _i(r"\bhotel (worker|union|strike|employee)"),
            _i(r"\brestaurant (worker|union|strike|employee)"),
            _i(r"\bfast food"),
            _i(r"\bFight for \$?15"),
        ),
    ),
    TagRule(
        "Maritime & Dockworkers",
        (
            _i(r"\bdockworker"),
            _i(r"\blongshoreman|longshoremen"),
            _c(r"\bILWU\b"),
            _c(r"\bILA\b"),
            _i(r"\bmaritim(e|er)"),
            _i(r"\bseaman|seamen"),
            _i(r"\bsailor[s]?\b"),
            _i(r"\bmerchant marin"),
            _i(r"\bwaterfront"),
            _i(r"\bHarry Bridges"),
        ),
    ),
    TagRule(
        "Domestic Workers",
        (
            _i(r"\bdomestic (worker|servant|service|labor|employee)"),
            _i(r"\bmaid[s]?\b"),
            _i(r"\bnanny|nannies"),
            _i(r"\bhome (care|health) (worker|aide)"),
        ),
    ),
    # Social dimension
    TagRule(
        "Civil Rights & Race",
        (
            _i(r"\bcivil rights"),
            _i(r"\bracial (justice|equality|discrimination|segregation)"),
            _i(r"\bsegregat(e[ds]?|ion|ing)\b"),
            _i(r"\bJim Crow"),
            _i(r"\bAfrican.American"),
            _i(r"\bBlack (worker|union|labor|freedom|lives)"),
            _i(r"\bA\.?\s*Philip\s+Randolph"),
            _i(r"\bBrotherhood of Sleeping Car"),
            _i(r"\bMarch on Washington"),
            _i(r"\bMLK\b"),
            _i(r"\bMartin Luther King"),
            _i(r"\bCoretta Scott King"),
            _c(r"\bNAACP\b"),
            _i(r"\brace\s+and\s+(labor|work)"),
        ),
    ),
    TagRule(
        "Women & Gender",
        (
            _i(r"\bwomen (worker|in the|labor|and|strike|organiz)"),
            _i(r"\b(female|woman) (worker|labor|organiz)"),
            _i(r"\bsuffrag(e|ist|ette)"),
            _i(r"\bfeminis(t|m)"),
            _i(r"\bequal pay"),
            _i(r"\bgender (gap|equity|equality|discrimination)"),
            _i(r"\bRosie the Riveter"),
            _i(r"\bClara Lemlich"),
            _i(r"\bRose Schneiderman"),
            _i(r"\bMary Harris Jones"),
            _i(r"\bFrances Perkins"),
            _i(r"\bDolores Huerta"),
            _i(r"\bsexual harassment"),
            _i(r"\b(Title IX|Title 7|Title VII)\b"),
        ),
    ),
    TagRule(
        "Immigration",
        (
            _i(r"\bimmigra(nt|tion|nts)\b"),
            _i(r"\bmigrant (worker|labor|farm)"),
            _i(r"\bundocumented (worker|immigrant|laborer)"),
            _i(r"\bforeign.born (worker|labor)"),
            _i(r"\bguest worker"),
            _i(r"\bdeport(ed|ation|ing)\b"),
            _i(r"\bbracero"),
            _i(r"\bChinese Exclusion"),
        ),
    ),
    TagRule(
        "War & Military",
        (
            _i(r"\bworld war"),
            _i(r"\bwar (effort|industry|production|time|bond)"),
            _i(r"\bwartime (labor|worker|production|industr)"),
            _c(r"\b(WWI|WWII|WW1|WW2)\b"),
            _i(r"\bVietnam.{0,15}(war|era|protest|veteran)"),
            _i(r"\bmilitary.{0,15}(labor|union|worker)"),
            _i(r"\bdefense (plant|industry|worker|production)"),
            _i(r"\barsenal"),
        ),
    ),
    TagRule(
        "Socialism & Left Politics",
        (
            _i(r"\bsocialis(t|m|ts)\b"),
            _i(r"\bcommuni(st|sm|sts)\b"),
            _i(r"\banarchis(t|m|ts)\b"),
            _c(r"\bIWW\b"),
            _i(r"\bIndustrial Workers of the World"),
            _i(r"\bWobbl(y|ies)\b"),
            _i(r"\bEugene\s+(V\.?\s+)?Debs"),
            _i(r"\bBig Bill Haywood"),
            _i(r"\bEmma Goldman"),
            _i(r"\bJoe Hill\b"),
            _i(r"\bRed Scare"),
            _i(r"\bMcCarthy(ism)?\b"),
            _i(r"\bblacklist(ed|ing)?\b"),
            _i(r"\bMarx(ist|ism)?\b"),
        ),
    ),
    TagRule(
        "Environment",
        (
            _i(r"\benvironment(al)?\s+(justice|movement|protect|regulat|law)"),
            _i(r"\bgreen (jobs|new deal|economy)"),
            _i(r"\bjust transition"),
            _i(r"\bclimate.{0,15}(change|justice|worker|job)"),
            _i(r"\bpollut(ion|ed|ing).{0,20}(worker|factory|plant|community)"),
            _i(r"\btoxic (exposure|waste|chemical).{0,20}(worker|factory|plant)"),
        ),
    ),
    TagRule(
        "Working Class",
        (
            _i(r"\bworking class"),
            _i(r"\bworking.class"),
            _i(r"\bblue.collar"),
            _i(r"\bclass (struggle|consciousness|conflict|warfare|solidarity)"),
            _i(r"\bproletaria(t|n)"),
        ),
    ),
    TagRule(
        "Politics & Elections",
        (
            _i(r"\b(labor|union).{0,20}(endors|candidate|election|campaign|vote|ballot|politic)"),
            _i(r"\b(election|vote|ballot|campaign|politic).{0,20}(labor|union|worker)"),
            _i(r"\blabor (party|movement|platform)"),
            _i(r"\bpolitical (action|committee|campaign).{0,15}(labor|union)"),
            _c(r"\bCOPE\b"),
            _i(r"\bPAC\b.{0,200}\b(union|labor)"),
        ),
    ),
)


def match_keyword_rules(text: str) -> set[str]:
    """Return the tags of every rule with at least one pattern matching text."""
    return {rule.tag for rule in TAG_RULES if rule.matches(text)}
