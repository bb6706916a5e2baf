"""Curated flashcards for common school topics.

Entries are checked in order and the first one with a pattern contained in the
lowercase topic wins, so broader patterns belong further down the table.
"""

from __future__ import annotations

from typing import NamedTuple

from cardgen.modules.flashcards.models import GeneratedFlashcard


class KnowledgeEntry(NamedTuple):
    name: str
    patterns: tuple[str, ...]
    cards: tuple[GeneratedFlashcard, ...]


def _entry(name: str, patterns: tuple[str, ...], pairs: list[tuple[str, str]]) -> KnowledgeEntry:
    return KnowledgeEntry(
        name=name,
        patterns=patterns,
        cards=tuple(GeneratedFlashcard(question=q, answer=a) for q, a in pairs),
    )


KNOWLEDGE_BANK: tuple[KnowledgeEntry, ...] = (
    _entry(
        "pollination",
        ("pollination", "pollinate"),
        [
            ("How do flowers transfer pollen between plants?",
             "Flowers transfer pollen through wind, insects, birds, and other animals."),
            ("What is the male reproductive part of a flower?",
             "The stamen is the male reproductive part that produces pollen."),
            ("What is the female reproductive part of a flower?",
             "The pistil is the female reproductive part that receives pollen."),
            ("Where does pollen land on the female flower?",
             "Pollen lands on the stigma, which is the sticky top part of the pistil."),
            ("What happens after successful pollination occurs?",
             "After pollination, fertilization occurs and seeds begin to develop."),
            ("Why do flowers have bright colors and sweet nectar?",
             "Bright colors and nectar attract pollinators like bees and butterflies."),
            ("Which plants rely on wind for pollination?",
             "Grasses, many trees, and some flowers rely on wind for pollination."),
            ("What is self-pollination in flowering plants?",
             "Self-pollination occurs when pollen from a flower fertilizes the same flower."),
        ],
    ),
    _entry(
        "brain",
        ("brain", "nervous system"),
        [
            ("What is the largest region of the human brain?",
             "The cerebrum is the largest region and controls thinking, memory, and voluntary movement."),
            ("Which part of the brain controls balance and coordination?",
             "The cerebellum controls balance, coordination, and fine motor movements."),
            ("What part of the brain controls breathing and heart rate?",
             "The brain stem controls vital functions like breathing, heart rate, and consciousness."),
            ("Where in the brain is memory primarily stored?",
             "The hippocampus is mainly responsible for forming and storing new memories."),
            ("Which brain lobe processes visual information?",
             "The occipital lobe processes visual information from the eyes."),
            ("What brain area controls speech production?",
             "Broca's area controls speech production and language expression."),
            ("Which brain structure processes emotions and fear?",
             "The amygdala processes emotions, fear responses, and emotional memories."),
            ("What brain region is responsible for decision making?",
             "The frontal lobe is responsible for decision making, planning, and personality."),
        ],
    ),
    _entry(
        "solar system",
        ("solar system", "planets"),
        [
            ("Which planet is the closest to the Sun?",
             "Mercury is the closest planet to the Sun."),
            ("Which planet is the largest in our solar system?",
             "Jupiter is the largest planet, more than eleven times wider than Earth."),
            ("Why is Mars often called the Red Planet?",
             "Iron oxide, or rust, in its soil and dust gives Mars a reddish color."),
            ("Which planet is best known for its bright rings?",
             "Saturn is best known for its wide, bright rings made of ice and rock."),
            ("How many planets orbit the Sun in our solar system?",
             "Eight planets orbit the Sun, from Mercury out to Neptune."),
            ("What is the name of the galaxy containing our solar system?",
             "Our solar system is part of the Milky Way galaxy."),
            ("What keeps the planets moving in orbit around the Sun?",
             "The Sun's gravity pulls on each planet and keeps it in orbit."),
            ("What is the difference between the inner and outer planets?",
             "The inner planets are small and rocky. The outer planets are large and made mostly of gas or ice."),
        ],
    ),
    _entry(
        "cell division",
        ("cell division", "mitosis", "meiosis"),
        [
            ("How many cells are produced at the end of mitosis?",
             "Mitosis produces two daughter cells that are genetically identical to the parent cell."),
            ("How many cells are produced at the end of meiosis?",
             "Meiosis produces four sex cells, each with half the usual number of chromosomes."),
            ("What are the four main phases of mitosis in order?",
             "The phases are prophase, metaphase, anaphase, and telophase."),
            ("How many chromosomes are found in a typical human body cell?",
             "A typical human body cell has 46 chromosomes arranged in 23 pairs."),
            ("Why is mitosis important for growth and repair in the body?",
             "Mitosis makes new identical cells that let the body grow and replace damaged tissue."),
            ("How does meiosis lead to genetic variation in offspring?",
             "Chromosomes swap pieces and sort randomly during meiosis. This gives every sex cell a unique mix of genes."),
        ],
    ),
    _entry(
        "photosynthesis",
        ("photosynthesis",),
        [
            ("What is the main sugar produced during photosynthesis?",
             "Photosynthesis produces glucose, a sugar the plant uses for energy and growth."),
            ("Which gas do plants release as a result of photosynthesis?",
             "Plants release oxygen into the air as a result of photosynthesis."),
            ("Which gas do plants absorb from the air for photosynthesis?",
             "Plants absorb carbon dioxide from the air through tiny pores called stomata."),
            ("What green pigment captures light energy in plant cells?",
             "Chlorophyll is the green pigment that captures light energy."),
            ("In which cell structure does photosynthesis take place?",
             "Photosynthesis takes place inside chloroplasts, found mostly in leaf cells."),
            ("What is the source of energy that drives photosynthesis?",
             "Sunlight provides the energy that drives photosynthesis."),
            ("Why are plants called producers in a food chain?",
             "Plants make their own food from sunlight, so they supply energy to every other organism in the chain."),
        ],
    ),
    _entry(
        "world war ii",
        ("world war ii", "world war 2", "second world war", "wwii", "ww2"),
        [
            ("In which year did World War II begin in Europe?",
             "World War II began in 1939 when Germany invaded Poland."),
            ("What event brought the United States into World War II?",
             "The Japanese attack on Pearl Harbor in December 1941 brought the United States into the war."),
            ("What was the goal of the D-Day landings in 1944?",
             "Allied troops landed in Normandy to begin freeing Western Europe from German occupation."),
            ("In which year did World War II come to an end?",
             "World War II ended in 1945 with the surrender of Germany and then Japan."),
            ("Which countries formed the main Axis powers during World War II?",
             "The main Axis powers were Germany, Italy, and Japan."),
            ("Which countries were the main Allied powers in World War II?",
             "The main Allied powers were the United States, the United Kingdom, and the Soviet Union."),
            ("Which Japanese cities were struck by atomic bombs in 1945?",
             "The United States dropped atomic bombs on Hiroshima and Nagasaki in August 1945."),
            ("Who led Nazi Germany during World War II?",
             "Adolf Hitler led Nazi Germany as its dictator throughout the war."),
        ],
    ),
    _entry(
        "genetics",
        ("dna", "genetics", "heredity", "genes"),
        [
            ("What is DNA and what role does it play in living things?",
             "DNA is the genetic material that carries the instructions for building and running every living thing."),
            ("What shape does a molecule of DNA have?",
             "DNA has a double helix shape, like a twisted ladder."),
            ("Which bases pair together on the rungs of DNA?",
             "Adenine pairs with thymine, and guanine pairs with cytosine."),
            ("How are traits passed from parents to their offspring?",
             "Offspring inherit one copy of each gene from each parent. The combination of these genes shapes their traits."),
            ("What is the difference between a genotype and a phenotype?",
             "A genotype is the set of genes an organism carries. A phenotype is the set of traits you can actually observe."),
            ("What does it mean for a trait to be dominant?",
             "A dominant trait shows up whenever at least one copy of its gene is present."),
        ],
    ),
    _entry(
        "circulatory system",
        ("heart", "circulatory", "blood", "cardiovascular"),
        [
            ("What are the main jobs of the circulatory system?",
             "The circulatory system carries oxygen and nutrients to cells and removes wastes like carbon dioxide."),
            ("How many chambers does the human heart have?",
             "The heart has four chambers, two upper atria and two lower ventricles."),
            ("What is the difference between arteries and veins?",
             "Arteries carry blood away from the heart. Veins carry blood back to the heart."),
            ("What are the main components of human blood?",
             "Blood is made of red cells, white cells, platelets, and a liquid called plasma."),
            ("What is the job of red blood cells?",
             "Red blood cells carry oxygen from the lungs to the rest of the body."),
            ("Why does the left side of the heart have thicker walls?",
             "The left ventricle must pump blood to the whole body, so it needs stronger muscle."),
        ],
    ),
    _entry(
        "digestive system",
        ("digestive", "digestion", "stomach", "intestine"),
        [
            ("What is the main function of the digestive system?",
             "The digestive system breaks food down into nutrients the body can absorb and use."),
            ("What happens to food while it is in the stomach?",
             "Stomach acid and enzymes start breaking down proteins. Muscles churn the food into a thick liquid called chyme."),
            ("Where does most nutrient absorption take place during digestion?",
             "Most nutrients are absorbed through the walls of the small intestine."),
            ("What role does saliva play at the start of digestion?",
             "Saliva moistens food and contains enzymes that begin breaking down starches."),
            ("What is the main job of the large intestine?",
             "The large intestine absorbs water and forms the remaining waste into stool."),
        ],
    ),
    _entry(
        "respiratory system",
        ("respiratory", "lungs", "breathing", "oxygen"),
        [
            ("What is the main function of the respiratory system?",
             "The respiratory system brings oxygen into the body and removes carbon dioxide."),
            ("Where does gas exchange happen inside the lungs?",
             "Gas exchange happens in tiny air sacs called alveoli, which are surrounded by capillaries."),
            ("Which part of the brain controls automatic breathing?",
             "The brain stem controls breathing by sensing carbon dioxide levels in the blood."),
            ("What muscle helps the lungs expand when you breathe in?",
             "The diaphragm contracts and moves down, which lets the lungs fill with air."),
            ("What path does air follow on its way into the lungs?",
             "Air passes through the nose or mouth, down the trachea, and into the bronchi."),
        ],
    ),
    _entry(
        "ecosystems",
        ("ecosystem", "environment", "food chain", "biodiversity"),
        [
            ("What is an ecosystem made up of?",
             "An ecosystem is a community of living things interacting with their physical surroundings."),
            ("What does a food chain show about an ecosystem?",
             "A food chain shows how energy passes from producers to consumers and on to decomposers."),
            ("What is biodiversity and why does it matter?",
             "Biodiversity is the variety of life in an area. High biodiversity makes ecosystems more stable and resilient."),
            ("What role do decomposers play in an ecosystem?",
             "Decomposers break down dead organisms and return nutrients to the soil."),
            ("How do human activities commonly harm natural ecosystems?",
             "Deforestation, pollution, and overfishing destroy habitats and reduce biodiversity."),
        ],
    ),
    _entry(
        "atoms",
        ("atom", "elements", "periodic table", "molecule"),
        [
            ("What is an atom in the simplest terms?",
             "An atom is the smallest unit of an element that keeps its chemical properties."),
            ("What are the three main particles that make up an atom?",
             "Atoms are made of protons, neutrons, and electrons."),
            ("Which particles are found in the nucleus of an atom?",
             "The nucleus contains positively charged protons and neutral neutrons."),
            ("How are elements arranged in the periodic table?",
             "Elements are arranged in order of increasing atomic number. Elements in the same column share similar properties."),
            ("What is the difference between an element and a compound?",
             "An element contains only one kind of atom. A compound contains two or more elements chemically bonded together."),
        ],
    ),
    _entry(
        "motion and forces",
        ("motion", "force", "gravity", "newton"),
        [
            ("What does Newton's first law of motion state?",
             "An object stays at rest or keeps moving at a constant velocity unless a force acts on it."),
            ("What does Newton's second law of motion state?",
             "Force equals mass times acceleration, so a larger force produces a larger acceleration."),
            ("What does Newton's third law of motion state?",
             "Every action has an equal and opposite reaction."),
            ("What is gravity and what does it do?",
             "Gravity is a force that pulls objects with mass toward each other."),
            ("What is the difference between speed and velocity?",
             "Speed is how fast something moves. Velocity is speed in a specific direction."),
            ("What is friction and how does it affect motion?",
             "Friction is a force between touching surfaces that resists motion and slows objects down."),
        ],
    ),
    _entry(
        "algebra",
        ("algebra", "equation", "variable", "polynomial"),
        [
            ("What does a variable represent in an algebraic expression?",
             "A variable is a symbol that stands for an unknown or changing number."),
            ("What makes an equation a linear equation?",
             "In a linear equation the highest power of the variable is one, so its graph is a straight line."),
            ("How do you solve a simple one-step algebraic equation?",
             "Use the inverse operation on both sides to get the variable by itself."),
            ("What does the distributive property allow you to do?",
             "It lets you multiply a number by each term inside parentheses, so a(b + c) = ab + ac."),
            ("How do you solve for x in 2x + 3 = 7?",
             "Subtract 3 from both sides and then divide by 2 to get x = 2."),
            ("What is the slope of a line on a graph?",
             "Slope measures how steep a line is, found by dividing the rise by the run."),
        ],
    ),
    _entry(
        "geometry",
        ("geometry", "triangle", "circle", "angle"),
        [
            ("What are the basic types of angles in geometry?",
             "Acute angles are under 90 degrees, right angles are exactly 90, and obtuse angles are between 90 and 180."),
            ("What does the Pythagorean theorem say about right triangles?",
             "In a right triangle, the square of the hypotenuse equals the sum of the squares of the other two sides."),
            ("How do you find the area of a circle?",
             "Multiply pi by the square of the radius, written as A = πr²."),
            ("What do the interior angles of any triangle add up to?",
             "The interior angles of any triangle always add up to 180 degrees."),
            ("What is the difference between an isosceles and an equilateral triangle?",
             "An isosceles triangle has two equal sides. An equilateral triangle has all three sides equal."),
            ("How do you find the perimeter of a rectangle?",
             "Add the length and width together and then multiply the result by two."),
        ],
    ),
)


def match_entry(topic_lower: str) -> KnowledgeEntry | None:
    for entry in KNOWLEDGE_BANK:
        if any(p in topic_lower for p in entry.patterns):
            return entry
    return None


def lookup(topic_lower: str) -> list[GeneratedFlashcard]:
    """Curated cards for the first matching entry, or an empty list."""
    entry = match_entry(topic_lower)
    if entry is None:
        return []
    return list(entry.cards)
