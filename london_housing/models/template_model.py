from .base import TextGenerator

_SUMMARIES = {
    "E1": (
        "Region {region} (Whitechapel, Stepney, Mile End) is experiencing a surge in new developments, "
        "particularly around transport hubs. This presents opportunities for capital growth, but also means "
        "increased construction and potential for oversupply in certain micro-locations. "
        "Rental demand remains strong."
    ),
    "SW1": (
        "The prestigious {region} (Westminster, Belgravia, Pimlico) continues to be a global prime market. "
        "Prices are relatively stable but high, appealing to UHNWIs. Potential risks include changes to "
        "international buyer regulations and global economic shifts. "
        "Opportunities lie in long-term secure investments."
    ),
    "N1": (
        "{region} (Islington, Barnsbury, Canonbury) maintains its popularity with affluent families and young "
        "professionals. Strong school catchments and boutique amenities drive demand. Limited housing stock "
        "creates upward price pressure. Risks are mainly tied to higher mortgage rates impacting affordability."
    ),
}

_DEFAULT_SUMMARY = (
    "Region {region} shows consistent demand with potential for moderate growth. Key factors include local "
    "regeneration projects and transport improvements. Consider exploring opportunities in both residential "
    "and commercial properties, but be mindful of market fluctuations."
)

class TemplateTextGenerator(TextGenerator):
    """
    Deterministic stand-in for a generative backend. Ignores the prompt and
    returns a canned summary for the region, so the same region always
    yields the same text.
    """
    async def generate(self, prompt: str, region: str) -> str:
        template = _SUMMARIES.get(region, _DEFAULT_SUMMARY)
        return template.format(region=region)
