"""NYC neighborhood "personality profiles".

Each neighborhood is a fixed reference point in the derived
(progressive, artistic, social) space, every axis on a 0-100 scale.
Declaration order is significant: it breaks distance ties.
"""

from __future__ import annotations

from foefinder.schemas.results import NeighborhoodProfile

NEIGHBORHOODS: tuple[NeighborhoodProfile, ...] = (
    NeighborhoodProfile(
        id="williamsburg",
        name="Williamsburg",
        description=(
            "You're a creative soul who values authenticity and self-expression. "
            "You appreciate both the old and new, mixing vintage finds with "
            "cutting-edge trends."
        ),
        traits=("Creative", "Trendy", "Independent", "Artistic"),
        vibe="Artisanal coffee, vinyl records, and rooftop views",
        reference_vector=(70, 85, 65),
    ),
    NeighborhoodProfile(
        id="upper-east-side",
        name="Upper East Side",
        description=(
            "You appreciate tradition, refinement, and the finer things in life. "
            "You value stability and have high standards for quality."
        ),
        traits=("Traditional", "Refined", "Ambitious", "Cultured"),
        vibe="Museum Mile, classic architecture, and elegant brunches",
        reference_vector=(30, 50, 60),
    ),
    NeighborhoodProfile(
        id="east-village",
        name="East Village",
        description=(
            "You're a free spirit who values individuality and isn't afraid to "
            "challenge conventions. Night owl energy with a rebellious streak."
        ),
        traits=("Rebellious", "Artistic", "Night Owl", "Eclectic"),
        vibe="Live music, dive bars, and late-night pizza",
        reference_vector=(80, 90, 80),
    ),
    NeighborhoodProfile(
        id="park-slope",
        name="Park Slope",
        description=(
            "You value community, family, and quality of life. Progressive "
            "values meet practical living in your world."
        ),
        traits=("Family-oriented", "Progressive", "Foodie", "Community-minded"),
        vibe="Farmers markets, stroller-friendly streets, and co-ops",
        reference_vector=(75, 55, 50),
    ),
    NeighborhoodProfile(
        id="soho",
        name="SoHo",
        description=(
            "You have an eye for style and appreciate luxury and aesthetics. "
            "You're drawn to beautiful things and curated experiences."
        ),
        traits=("Fashion-forward", "Luxury-loving", "Aesthetic", "Trendsetting"),
        vibe="Designer boutiques, art galleries, and cobblestone streets",
        reference_vector=(50, 80, 70),
    ),
    NeighborhoodProfile(
        id="astoria",
        name="Astoria",
        description=(
            "You're practical, community-minded, and appreciate diversity. "
            "You value genuine connections and good food over flash."
        ),
        traits=("Diverse", "Community-minded", "Practical", "Food-loving"),
        vibe="International cuisines, beer gardens, and neighborhood pride",
        reference_vector=(60, 45, 75),
    ),
    NeighborhoodProfile(
        id="bushwick",
        name="Bushwick",
        description=(
            "You're avant-garde and resourceful, making something from nothing. "
            "DIY spirit meets creative ambition."
        ),
        traits=("Avant-garde", "Budget-conscious", "DIY", "Experimental"),
        vibe="Street art, warehouse parties, and creative collectives",
        reference_vector=(85, 95, 60),
    ),
    NeighborhoodProfile(
        id="financial-district",
        name="Financial District",
        description=(
            "You're driven, efficient, and value your time. Career-focused "
            "with an appreciation for urban convenience."
        ),
        traits=("Career-driven", "Efficient", "Urban", "Ambitious"),
        vibe="Skyscrapers, power lunches, and waterfront views",
        reference_vector=(35, 25, 55),
    ),
)
