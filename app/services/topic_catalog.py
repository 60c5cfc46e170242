"""Static DSA topic list."""

from app.schemas.topic_schema import Topic

DSA_TOPICS: tuple[Topic, ...] = (
    Topic(
        name="Arrays",
        description="Basic data structure to store elements",
        savage_intro="Arrays: Not your cricket team lineup, but close enough",
        difficulty="Beginner",
        icon="📊",
    ),
    Topic(
        name="Stacks",
        description="LIFO data structure",
        savage_intro="Stacks: Like your mom's paratha pile - last in, first out",
        difficulty="Beginner",
        icon="📚",
    ),
    Topic(
        name="Trees",
        description="Hierarchical data structure",
        savage_intro="Trees: Not the ones outside, idiot. These grow upside down",
        difficulty="Intermediate",
        icon="🌳",
    ),
    Topic(
        name="Graphs",
        description="Connected nodes and edges",
        savage_intro="Graphs: Like your social network, but actually useful",
        difficulty="Advanced",
        icon="🕸️",
    ),
)


def list_topics() -> list[Topic]:
    return list(DSA_TOPICS)
