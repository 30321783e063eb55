"""Seeded demo content for the home and sculptor feeds and the services tab."""
from __future__ import annotations

from .models import Comment, SamplePost, Service

HOME_FEED = "home"
SCULPTOR_FEED = "photo"

HOME_POSTS: tuple[SamplePost, ...] = (
    SamplePost(
        id=1,
        feed=HOME_FEED,
        author="John Photographer",
        username="@johnphoto",
        time_ago="2 hours ago",
        title="Amazing sunset shoot today!",
        description="Amazing sunset shoot today! 📸 The colors were absolutely breathtaking.",
    ),
    SamplePost(
        id=2,
        feed=HOME_FEED,
        author="Maria Sculptor",
        username="@mariasculpts",
        time_ago="5 hours ago",
        title="New marble sculpture finished!",
        description="New marble sculpture finished! 🗿 This piece took 3 months to complete.",
    ),
)

SCULPTOR_POSTS: tuple[SamplePost, ...] = (
    SamplePost(
        id=1,
        feed=SCULPTOR_FEED,
        author="Maria Sculptor",
        username="@mariasculpts",
        time_ago="2 hours ago",
        title="Marble Goddess",
        description="Finished this marble sculpture after 4 months of work. The details were challenging but worth it! 🗿",
        comments=(
            Comment("Art Lover", "Absolutely stunning! The details are incredible", "1h ago", "$5"),
            Comment("John Artist", "Your work inspires me so much!", "45m ago", "$3"),
        ),
    ),
    SamplePost(
        id=2,
        feed=SCULPTOR_FEED,
        author="David Stone",
        username="@davidstoneart",
        time_ago="5 hours ago",
        title="Bronze Warrior",
        description="New bronze piece inspired by ancient Greek warriors. The patina process took weeks! ⚔️",
        comments=(
            Comment("Sculpture Fan", "The texture is amazing!", "3h ago", "$7"),
            Comment("Emma Art", "How long did this take to make?", "2h ago", "$2"),
        ),
    ),
    SamplePost(
        id=3,
        feed=SCULPTOR_FEED,
        author="Luna Clay",
        username="@lunaclayworks",
        time_ago="1 day ago",
        title="Ceramic Dreams",
        description="Experimental ceramic piece exploring fluid forms. Glazed with custom turquoise finish. 🏺",
        comments=(
            Comment("Clay Master", "Beautiful glaze work!", "12h ago", "$4"),
            Comment("Pottery Pro", "The form is so organic, love it!", "8h ago", "$6"),
        ),
    ),
    SamplePost(
        id=4,
        feed=SCULPTOR_FEED,
        author="Alex Modern",
        username="@alexmodernsculpt",
        time_ago="2 days ago",
        title="Steel Abstract",
        description="Industrial meets art in this welded steel sculpture. Playing with negative space and light. 🏗️",
        comments=(
            Comment("Metal Artist", "Great use of industrial materials!", "1d ago", "$8"),
            Comment("Design Fan", "The shadows it creates must be amazing", "20h ago", "$3"),
        ),
    ),
    SamplePost(
        id=5,
        feed=SCULPTOR_FEED,
        author="Sophia Wood",
        username="@sophiawoodcarver",
        time_ago="3 days ago",
        title="Wood Spirit",
        description="Hand-carved oak sculpture representing forest spirits. Every curve tells a story. 🌳",
        comments=(
            Comment("Wood Worker", "Incredible craftsmanship!", "2d ago", "$10"),
            Comment("Nature Art", "You can feel the spirit in this piece", "1d ago", "$5"),
        ),
    ),
)

HOME_LIKES: dict[int, int] = {1: 24, 2: 18}
SCULPTOR_LIKES: dict[int, int] = {1: 45, 2: 32, 3: 67, 4: 28, 5: 89}

SERVICES: tuple[Service, ...] = (
    Service("Portrait Photography", "$50", "Professional portrait sessions"),
    Service("Event Photography", "$100", "Weddings, parties, events"),
    Service("Photo Editing", "$30", "Professional photo retouching"),
    Service("Sculpture Commission", "$200", "Custom marble sculptures"),
    Service("Art Consultation", "$75", "Professional art advice"),
    Service("Digital Art", "$60", "Custom digital artwork"),
)

# (tip count, total amount in dollars)
TIP_TOTALS: dict[str, tuple[int, int]] = {
    "Daily": (5, 23),
    "Monthly": (102, 487),
    "Yearly": (1100, 5340),
}
