"""Keyword/category heuristics for shelf life and restock timing.

The table is an ordered list of keywords per category. Lookup returns the
first keyword that is a substring of the lowercased item name, so a longer
keyword only wins when it is declared before any shorter keyword it
contains (``"green onion"`` is shadowed by ``"onion"`` in Produce).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import ShelfLifePair

logger = logging.getLogger(__name__)

GLOBAL_DEFAULT = ShelfLifePair(shelf_life_days=30, restock_days=30)


@dataclass(frozen=True)
class CategoryRules:
    default: ShelfLifePair
    keywords: tuple[tuple[str, ShelfLifePair], ...] = ()

    def match(self, name_lower: str) -> ShelfLifePair:
        for keyword, rule in self.keywords:
            if keyword in name_lower:
                return rule
        return self.default


class RuleTable:
    """Read-only mapping of category name to :class:`CategoryRules`."""

    def __init__(
        self,
        categories: Mapping[str, CategoryRules],
        fallback: ShelfLifePair = GLOBAL_DEFAULT,
    ) -> None:
        self._categories = MappingProxyType(dict(categories))
        self._fallback = fallback

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Mapping],
        fallback: ShelfLifePair = GLOBAL_DEFAULT,
    ) -> RuleTable:
        """Build a table from ``{"default": (days, days), "keywords": [...]}``.

        Keyword entries are ``(keyword, shelf_life_days, restock_days)``
        triples and keep their given order. Keywords are lowercased.
        """
        categories: dict[str, CategoryRules] = {}
        for category, entry in raw.items():
            shelf_life, restock = entry["default"]
            categories[category] = CategoryRules(
                default=ShelfLifePair(shelf_life, restock),
                keywords=_keyword_rules(entry.get("keywords", ())),
            )
        return cls(categories, fallback=fallback)

    @property
    def fallback(self) -> ShelfLifePair:
        return self._fallback

    def categories(self) -> list[str]:
        return list(self._categories)

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def lookup(self, name: str, category: str) -> ShelfLifePair:
        """Return the day counts for an item. Never raises."""
        rules = self._categories.get(category)
        if rules is None:
            logger.info("Unknown category %r, using global default", category)
            return self._fallback
        return rules.match(name.lower())


def _keyword_rules(
    entries: Iterable[tuple[str, int, int]],
) -> tuple[tuple[str, ShelfLifePair], ...]:
    return tuple(
        (keyword.lower(), ShelfLifePair(shelf_life, restock))
        for keyword, shelf_life, restock in entries
    )


def lookup(name: str, category: str) -> ShelfLifePair:
    """Look an item up in the built-in table."""
    return DEFAULT_RULES.lookup(name, category)


# (keyword, shelf_life_days, restock_days), first match wins
_HEURISTIC_RULES: dict[str, dict] = {
    "Produce": {
        "default": (5, 7),
        "keywords": [
            # Apples
            ("apple", 35, 21),
            ("ambrosia", 35, 21),
            ("braeburn", 35, 21),
            ("cosmic crisp", 35, 21),
            ("cripps pink", 35, 21),
            ("envy", 35, 21),
            ("fuji", 35, 21),
            ("gala", 35, 21),
            ("golden delicious", 35, 21),
            ("granny smith", 35, 21),
            ("honeycrisp", 35, 21),
            ("jazz", 35, 21),
            ("jonagold", 35, 21),
            ("mcintosh", 35, 21),
            ("pink lady", 35, 21),
            ("rome", 35, 21),
            # Citrus fruits
            ("orange", 14, 10),
            ("navel orange", 14, 10),
            ("valencia orange", 14, 10),
            ("blood orange", 14, 10),
            ("cara cara", 14, 10),
            ("lemon", 21, 14),
            ("eureka lemon", 21, 14),
            ("meyer lemon", 21, 14),
            ("key lime", 21, 14),
            ("persian lime", 21, 14),
            ("lime", 21, 14),
            ("grapefruit", 17, 14),
            ("tangerine", 14, 10),
            ("mandarin", 10, 7),
            ("clementine", 10, 7),
            ("minneola", 14, 10),
            ("pomelo", 14, 10),
            # Stone fruits
            ("peach", 4, 7),
            ("nectarine", 4, 7),
            ("apricot", 4, 7),
            ("plum", 4, 7),
            ("pluot", 4, 7),
            ("cherry", 6, 7),
            # Berries
            ("strawberry", 4, 5),
            ("strawberries", 4, 5),
            ("blueberry", 7, 7),
            ("blueberries", 7, 7),
            ("raspberry", 2, 5),
            ("raspberries", 2, 5),
            ("blackberry", 4, 5),
            ("blackberries", 4, 5),
            ("boysenberry", 2, 5),
            ("cranberry", 5, 7),
            ("cranberries", 5, 7),
            # Other fruits
            ("banana", 2, 5),
            ("avocado", 3, 7),
            ("grape", 6, 7),
            ("grapes", 6, 7),
            ("cotton candy grapes", 6, 7),
            ("mango", 6, 7),
            ("pineapple", 4, 7),
            ("papaya", 4, 7),
            ("kiwi", 5, 7),
            ("cantaloupe", 7, 7),
            ("honeydew", 7, 7),
            ("watermelon", 7, 7),
            ("pomegranate", 60, 30),
            ("pomegranate arils", 6, 7),
            ("persimmon", 5, 7),
            ("fig", 5, 7),
            ("date", 5, 7),
            ("coconut", 5, 7),
            ("lychee", 5, 7),
            ("dragon fruit", 5, 7),
            ("guava", 5, 7),
            ("passion fruit", 5, 7),
            ("starfruit", 5, 7),
            ("plantain", 5, 7),
            # Leafy greens
            ("lettuce", 10, 7),
            ("iceberg", 10, 7),
            ("romaine", 10, 7),
            ("butterhead", 6, 7),
            ("boston", 6, 7),
            ("bibb", 6, 7),
            ("spinach", 5, 7),
            ("arugula", 4, 5),
            ("kale", 6, 7),
            ("collard", 6, 7),
            ("mustard greens", 6, 7),
            ("swiss chard", 6, 7),
            ("endive", 6, 7),
            ("belgian endive", 5, 7),
            ("radicchio", 6, 7),
            ("watercress", 5, 7),
            ("microgreens", 5, 7),
            ("mixed greens", 5, 7),
            ("spring mix", 5, 7),
            ("power greens", 5, 7),
            ("baby spinach", 5, 7),
            # Root vegetables
            ("carrot", 17, 14),
            ("baby carrot", 17, 14),
            ("beet", 17, 14),
            ("radish", 10, 7),
            ("daikon", 6, 7),
            ("turnip", 17, 14),
            ("rutabaga", 6, 7),
            ("parsnip", 17, 14),
            ("jicama", 6, 7),
            ("celeriac", 5, 7),
            # Alliums
            ("onion", 45, 30),
            ("yellow onion", 45, 30),
            ("red onion", 45, 30),
            ("white onion", 45, 30),
            ("sweet onion", 45, 30),
            ("shallot", 5, 7),
            ("green onion", 5, 7),
            ("scallion", 6, 7),
            ("garlic", 120, 60),
            ("ginger", 25, 21),
            # Potatoes
            ("potato", 45, 30),
            ("russet", 45, 30),
            ("sweet potato", 17, 14),
            ("yam", 6, 7),
            # Squash and gourds
            ("butternut", 30, 21),
            ("acorn squash", 30, 21),
            ("winter squash", 30, 21),
            ("pumpkin", 30, 21),
            ("zucchini", 6, 7),
            ("yellow squash", 6, 7),
            ("cucumber", 5, 7),
            ("eggplant", 7, 7),
            # Peppers
            ("bell pepper", 10, 7),
            ("green pepper", 10, 7),
            ("red pepper", 6, 7),
            ("yellow pepper", 6, 7),
            ("orange pepper", 6, 7),
            ("jalapeño", 10, 7),
            ("serrano", 10, 7),
            ("habanero", 10, 7),
            ("poblano", 10, 7),
            ("anaheim", 10, 7),
            ("banana pepper", 10, 7),
            ("shishito", 10, 7),
            # Tomatoes
            ("tomato", 4, 7),
            ("roma", 5, 7),
            ("cherry tomato", 5, 7),
            ("grape tomato", 4, 7),
            ("heirloom", 4, 7),
            ("tomatillo", 6, 7),
            # Cruciferous vegetables
            ("broccoli", 4, 7),
            ("broccolini", 5, 7),
            ("cauliflower", 10, 7),
            ("brussels sprouts", 4, 7),
            ("cabbage", 10, 7),
            ("green cabbage", 10, 7),
            ("red cabbage", 10, 7),
            ("napa cabbage", 6, 7),
            ("bok choy", 6, 7),
            ("baby bok choy", 5, 7),
            ("rapini", 5, 7),
            ("kohlrabi", 6, 7),
            # Other vegetables
            ("celery", 10, 7),
            ("corn", 1, 5),
            ("corn on the cob", 1, 5),
            ("asparagus", 4, 7),
            ("green bean", 4, 7),
            ("snow pea", 4, 7),
            ("sugar snap pea", 4, 7),
            ("artichoke", 6, 7),
            ("fennel", 6, 7),
            ("leek", 6, 7),
            ("okra", 6, 7),
            ("mushroom", 4, 7),
            ("button mushroom", 4, 7),
            ("cremini", 4, 7),
            ("portobello", 4, 7),
            # Sprouts
            ("alfalfa sprout", 5, 7),
            ("bean sprout", 5, 7),
            # Fresh herbs
            ("basil", 4, 7),
            ("cilantro", 4, 7),
            ("parsley", 4, 7),
            ("mint", 4, 7),
            ("dill", 4, 7),
            ("chives", 4, 7),
            ("oregano", 4, 7),
            ("tarragon", 4, 7),
            ("sage", 10, 7),
            ("rosemary", 10, 7),
            ("thyme", 10, 7),
            ("fennel frond", 5, 7),
            ("horseradish", 5, 7),
        ],
    },
    "Dairy": {
        "default": (10, 7),
        "keywords": [
            # Milk and liquid dairy
            ("milk", 6, 7),
            ("whole milk", 6, 7),
            ("skim milk", 6, 7),
            ("2% milk", 6, 7),
            ("lactose-free milk", 6, 7),
            ("buttermilk", 6, 7),
            ("half-and-half", 4, 7),
            ("heavy cream", 4, 7),
            ("heavy whipping cream", 4, 7),
            ("light cream", 4, 7),
            ("whipping cream", 4, 7),
            ("coffee creamer", 4, 7),
            # Plant milks
            ("almond milk", 8, 7),
            ("soy milk", 8, 7),
            ("oat milk", 8, 7),
            ("coconut milk", 8, 7),
            ("cashew milk", 8, 7),
            # Eggs
            ("eggs", 30, 14),
            ("egg", 30, 14),
            ("egg whites", 3, 7),
            ("egg yolks", 3, 7),
            ("egg substitutes", 3, 7),
            ("hard-cooked eggs", 7, 7),
            # Butter and spreads
            ("butter", 60, 30),
            ("salted butter", 60, 30),
            ("unsalted butter", 60, 30),
            ("ghee", 60, 30),
            # Fresh cheeses
            ("mozzarella", 23, 14),
            ("fresh mozzarella", 7, 7),
            ("ricotta", 7, 7),
            ("cottage cheese", 7, 7),
            ("cream cheese", 7, 7),
            ("mascarpone", 7, 7),
            ("burrata", 7, 7),
            ("goat cheese", 7, 7),
            ("chèvre", 7, 7),
            ("feta", 7, 7),
            # Semi-hard cheeses
            ("cheddar", 23, 14),
            ("swiss", 23, 14),
            ("monterey jack", 23, 14),
            ("colby", 23, 14),
            ("colby-jack", 23, 14),
            ("havarti", 23, 14),
            ("muenster", 23, 14),
            ("provolone", 23, 14),
            ("pepper jack", 23, 14),
            ("gouda", 23, 14),
            ("fontina", 23, 14),
            ("emmental", 23, 14),
            ("jarlsberg", 23, 14),
            ("manchego", 23, 14),
            ("halloumi", 23, 14),
            ("ricotta salata", 23, 14),
            # Hard cheeses
            ("parmesan", 23, 14),
            ("parmigiano-reggiano", 23, 14),
            ("pecorino romano", 23, 14),
            ("grana padano", 23, 14),
            ("asiago", 23, 14),
            # Soft-ripened cheeses
            ("brie", 7, 7),
            ("camembert", 7, 7),
            ("blue cheese", 7, 7),
            ("taleggio", 7, 7),
            # Yogurt and fermented
            ("yogurt", 10, 7),
            ("greek yogurt", 10, 7),
            ("plain yogurt", 10, 7),
            ("flavored yogurt", 10, 7),
            ("skyr", 10, 7),
            ("kefir", 10, 7),
        ],
    },
    "Meat": {
        "default": (2, 7),
        "keywords": [
            # Ground meats
            ("ground beef", 1, 7),
            ("ground chicken", 1, 7),
            ("ground turkey", 1, 7),
            ("ground pork", 1, 7),
            ("ground lamb", 1, 7),
            ("ground veal", 1, 7),
            # Chicken
            ("chicken breast", 1, 7),
            ("chicken thigh", 1, 7),
            ("chicken drumstick", 1, 7),
            ("chicken wing", 1, 7),
            ("chicken tender", 1, 7),
            ("chicken cutlet", 1, 7),
            ("chicken leg quarter", 1, 7),
            ("whole chicken", 1, 7),
            ("rotisserie chicken", 3, 7),
            # Turkey
            ("turkey breast", 1, 7),
            ("turkey thigh", 1, 7),
            ("turkey drumstick", 1, 7),
            ("turkey wing", 1, 7),
            ("whole turkey", 1, 7),
            # Beef cuts
            ("beef steak", 4, 7),
            ("ribeye", 4, 7),
            ("sirloin", 4, 7),
            ("strip steak", 4, 7),
            ("tenderloin", 4, 7),
            ("t-bone", 4, 7),
            ("porterhouse", 4, 7),
            ("flank steak", 4, 7),
            ("skirt steak", 4, 7),
            ("london broil", 4, 7),
            ("chuck roast", 4, 7),
            ("bottom round", 4, 7),
            ("eye of round", 4, 7),
            ("top round", 4, 7),
            ("rib roast", 4, 7),
            ("brisket", 4, 7),
            ("tri-tip", 4, 7),
            ("beef ribs", 2, 7),
            ("short ribs", 4, 7),
            ("stew meat", 4, 7),
            ("beef liver", 1, 7),
            ("beef tongue", 1, 7),
            ("beef cheeks", 1, 7),
            ("oxtail", 1, 7),
            # Pork
            ("pork chop", 4, 7),
            ("pork tenderloin", 4, 7),
            ("pork loin", 4, 7),
            ("pork shoulder", 4, 7),
            ("pork butt", 4, 7),
            ("pork sirloin roast", 4, 7),
            ("baby back ribs", 4, 7),
            ("spare ribs", 4, 7),
            ("country-style ribs", 4, 7),
            ("fresh ham", 4, 7),
            ("pork cutlet", 4, 7),
            ("schnitzel", 4, 7),
            # Lamb
            ("lamb chop", 4, 7),
            ("lamb rack", 4, 7),
            ("lamb leg", 4, 7),
            ("lamb shoulder", 4, 7),
            ("lamb shank", 4, 7),
            # Fish and seafood
            ("salmon", 1, 5),
            ("tuna", 1, 5),
            ("cod", 1, 5),
            ("halibut", 1, 5),
            ("mahi-mahi", 1, 5),
            ("snapper", 1, 5),
            ("flounder", 1, 5),
            ("sole", 1, 5),
            ("tilapia", 1, 5),
            ("catfish", 1, 5),
            ("trout", 1, 5),
            ("sea trout", 1, 5),
            ("arctic char", 1, 5),
            ("bluefish", 1, 5),
            ("mackerel", 1, 5),
            ("sardines", 1, 5),
            ("anchovies", 1, 5),
            ("swordfish", 1, 5),
            ("rockfish", 1, 5),
            ("ocean perch", 1, 5),
            ("pollock", 1, 5),
            ("haddock", 1, 5),
            ("sablefish", 1, 5),
            ("black cod", 1, 5),
            # Shellfish
            ("shrimp", 4, 7),
            ("crab", 3, 7),
            ("lobster", 3, 7),
            ("scallops", 6, 7),
            ("squid", 2, 7),
            ("calamari", 2, 7),
            ("crayfish", 6, 7),
            ("live crab", 1, 5),
            ("live lobster", 1, 5),
            ("live clams", 7, 7),
            ("live mussels", 7, 7),
            ("live oysters", 7, 7),
            ("shucked clams", 6, 7),
            ("shucked mussels", 6, 7),
            ("shucked oysters", 6, 7),
            # Processed meats
            ("bacon", 7, 7),
            ("ham", 4, 7),
            ("honey ham", 4, 7),
            ("deli ham", 4, 7),
            ("deli turkey", 4, 7),
            ("deli roast beef", 4, 7),
            ("roast beef", 4, 7),
            ("smoked turkey", 4, 7),
            ("bologna", 4, 7),
            ("salami", 4, 7),
            ("mortadella", 4, 7),
            ("hot dogs", 7, 7),
            # Fresh sausages
            ("fresh sausage", 2, 7),
            ("italian sausage", 2, 7),
            ("bratwurst", 2, 7),
            ("chorizo", 2, 7),
            # Cooked leftovers
            ("cooked chicken", 3, 7),
            ("cooked beef", 3, 7),
            ("cooked pork", 3, 7),
            ("cooked fish", 3, 7),
            # Salads
            ("chicken salad", 3, 7),
            ("tuna salad", 3, 7),
            ("egg salad", 3, 7),
            # Frozen cuts
            ("frozen", 120, 30),
        ],
    },
    "Pantry": {
        "default": (180, 60),
        "keywords": [
            # Bread and baked goods
            ("bread", 4, 7),
            ("sandwich bread", 4, 7),
            ("white bread", 4, 7),
            ("whole wheat bread", 4, 7),
            ("whole grain bread", 4, 7),
            ("multigrain bread", 4, 7),
            ("sourdough", 4, 7),
            ("rye bread", 4, 7),
            ("pumpernickel", 4, 7),
            ("gluten-free bread", 4, 7),
            ("artisan bread", 4, 7),
            ("crusty loaf", 4, 7),
            ("brioche", 4, 7),
            ("bagel", 4, 7),
            ("english muffin", 4, 7),
            ("croissant", 1, 5),
            ("danish pastry", 1, 5),
            ("muffin", 1, 5),
            ("naan", 4, 7),
            ("pita bread", 4, 7),
            ("tortilla", 4, 7),
            ("corn tortilla", 4, 7),
            ("flour tortilla", 4, 7),
            # Grains and rice
            ("rice", 270, 90),
            ("white rice", 270, 90),
            ("brown rice", 270, 90),
            ("basmati rice", 270, 90),
            ("jasmine rice", 270, 90),
            ("quinoa", 270, 90),
            ("oats", 270, 90),
            ("rolled oats", 270, 90),
            ("steel-cut oats", 270, 90),
            ("instant oats", 270, 90),
            ("couscous", 270, 90),
            ("polenta", 270, 90),
            ("cornmeal", 270, 90),
            # Pasta
            ("pasta", 270, 90),
            ("spaghetti", 270, 90),
            ("penne", 270, 90),
            ("macaroni", 270, 90),
            ("rotini", 270, 90),
            ("cooked pasta", 3, 7),
            ("cooked rice", 3, 7),
            # Flour and baking
            ("flour", 270, 90),
            ("all-purpose flour", 270, 90),
            ("whole wheat flour", 270, 90),
            ("baking powder", 270, 90),
            ("baking soda", 270, 90),
            ("yeast", 270, 90),
            ("sugar", 270, 90),
            ("granulated sugar", 270, 90),
            ("brown sugar", 270, 90),
            ("powdered sugar", 270, 90),
            # Canned, low acid
            ("canned", 1095, 90),
            ("canned chicken", 1095, 90),
            ("canned corn", 1095, 90),
            ("canned green beans", 1095, 90),
            ("canned soup", 1095, 90),
            ("chicken noodle soup", 1095, 90),
            ("chickpeas", 1095, 90),
            ("garbanzo beans", 1095, 90),
            ("black beans", 1095, 90),
            ("pinto beans", 1095, 90),
            ("kidney beans", 1095, 90),
            ("peas", 1095, 90),
            ("tuna", 1095, 90),
            ("chicken broth", 1095, 90),
            # Canned, high acid
            ("canned tomatoes", 455, 60),
            ("tomato sauce", 455, 60),
            ("diced tomatoes", 455, 60),
            ("canned peaches", 455, 60),
            ("canned pears", 455, 60),
            ("canned pineapple", 455, 60),
            ("pumpkin puree", 455, 60),
            # Dry legumes
            ("dry beans", 730, 180),
            ("lentils", 730, 180),
            ("split peas", 730, 180),
            # Nuts and seeds
            ("nuts", 180, 60),
            ("almonds", 180, 60),
            ("cashews", 180, 60),
            ("peanuts", 180, 60),
            ("pecans", 180, 60),
            ("pistachios", 180, 60),
            ("walnuts", 180, 60),
            ("pumpkin seeds", 180, 60),
            ("pepitas", 180, 60),
            ("sunflower seeds", 180, 60),
            # Nut butters
            ("peanut butter", 75, 30),
            ("almond butter", 75, 30),
            ("tahini", 75, 30),
            # Oils and vinegars
            ("oil", 180, 90),
            ("olive oil", 180, 90),
            ("vegetable oil", 180, 90),
            ("sesame oil", 180, 90),
            ("vinegar", 1095, 365),
            # Condiments and sauces
            ("honey", 1095, 365),
            ("jam", 180, 90),
            ("jelly", 180, 90),
            ("ketchup", 120, 60),
            ("mustard", 120, 60),
            ("mayonnaise", 120, 60),
            ("bbq sauce", 120, 60),
            ("hot sauce", 120, 60),
            ("soy sauce", 120, 60),
            ("worcestershire", 120, 60),
            ("salsa", 120, 60),
            ("salad dressing", 120, 60),
            ("vinaigrette", 120, 60),
            # Coffee and tea
            ("coffee", 150, 60),
            ("ground coffee", 45, 30),
            ("tea", 540, 180),
            ("leaf tea", 540, 180),
            ("cold brew", 8, 7),
            ("iced tea", 4, 7),
            # Breakfast cereals and granola
            ("cereal", 270, 60),
            ("breakfast cereal", 270, 60),
            ("corn flakes", 270, 60),
            ("bran flakes", 270, 60),
            ("cheerios", 270, 60),
            ("oat squares", 270, 60),
            ("rice cereal", 270, 60),
            ("granola", 270, 60),
            ("muesli", 270, 60),
            # Snacks
            ("crackers", 270, 60),
            ("cookies", 270, 60),
            ("potato chips", 150, 60),
            ("pretzels", 150, 60),
            ("popcorn", 270, 60),
            ("trail mix", 150, 60),
            ("protein bars", 150, 60),
            ("tortilla chips", 150, 60),
            # Deli salads
            ("macaroni salad", 3, 7),
            ("soups", 3, 7),
            ("stews", 3, 7),
        ],
    },
    "Frozen": {
        "default": (120, 30),
        "keywords": [
            # Fruit and vegetables
            ("frozen fruit", 150, 60),
            ("frozen vegetables", 150, 60),
            ("frozen berries", 150, 60),
            # Meals and proteins
            ("ice cream", 120, 30),
            ("frozen pizza", 120, 30),
            ("frozen chicken nuggets", 150, 60),
            ("frozen fish fillets", 150, 60),
            ("frozen shrimp", 150, 60),
            # Anything else marked frozen
            ("frozen", 120, 30),
        ],
    },
    "Beverages": {
        "default": (90, 30),
        "keywords": [
            # Juices
            ("juice", 8, 7),
            ("apple juice", 8, 7),
            ("orange juice", 8, 7),
            # Plant milks
            ("almond milk", 8, 7),
            ("soy milk", 8, 7),
            ("oat milk", 8, 7),
            ("coconut milk", 8, 7),
            ("cashew milk", 8, 7),
            # Soda
            ("soda", 90, 30),
            ("open soda", 8, 7),
            # Water
            ("water", 365, 60),
            # Coffee and tea
            ("coffee", 150, 60),
            ("tea", 540, 180),
            ("cold brew coffee", 8, 7),
            ("iced tea", 4, 7),
        ],
    },
    "Household": {
        "default": (365, 90),
        "keywords": [
            ("paper", 365, 60),
            ("detergent", 365, 90),
            ("soap", 365, 60),
        ],
    },
    "Personal Care": {
        "default": (365, 90),
        "keywords": [
            ("toothpaste", 730, 90),
            ("shampoo", 365, 90),
            ("deodorant", 365, 90),
        ],
    },
    "Baby": {
        "default": (30, 14),
        "keywords": [
            ("formula", 30, 14),
            ("diapers", 365, 30),
            ("food", 14, 14),
        ],
    },
    "Pet": {
        "default": (90, 30),
        "keywords": [
            ("food", 90, 30),
            ("treats", 180, 60),
            ("litter", 365, 30),
        ],
    },
}

DEFAULT_RULES = RuleTable.from_mapping(_HEURISTIC_RULES)
