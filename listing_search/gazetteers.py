"""
Fixed keyword tables used by the interpreter.
Order matters: every scan walks these tuples front to back, so earlier entries win ties.
All entries are lowercase.
"""

from typing import Dict, Tuple


# Known vehicle makes (common in the NZ market)
VEHICLE_MAKES: Tuple[str, ...] = (
	'toyota', 'honda', 'mazda', 'nissan', 'mitsubishi', 'subaru', 'suzuki',
	'ford', 'holden', 'bmw', 'mercedes', 'audi', 'volkswagen', 'lexus',
	'hyundai', 'kia', 'chevrolet', 'dodge', 'jeep', 'ram',
	'tesla', 'porsche', 'volvo', 'jaguar', 'land rover', 'range rover',
	'peugeot', 'renault', 'citroen', 'fiat', 'alfa romeo',
	'skoda', 'seat', 'mini', 'chrysler', 'isuzu', 'daihatsu',
)

# NZ cities, regions and a curated set of suburbs; multi-word places precede their fragments
NZ_LOCATIONS: Tuple[str, ...] = (
	'auckland', 'wellington', 'christchurch', 'hamilton', 'tauranga',
	'dunedin', 'palmerston north', 'napier', 'hastings', 'nelson',
	'rotorua', 'new plymouth', 'whangarei', 'invercargill', 'gisborne',
	'timaru', 'queenstown', 'northland', 'waikato', 'bay of plenty',
	'hawkes bay', 'taranaki', 'manawatu', 'wairarapa', 'tasman',
	'marlborough', 'west coast', 'canterbury', 'otago', 'southland',
	# Auckland suburbs
	'mount eden', 'ponsonby', 'parnell', 'newmarket', 'remuera', 'grey lynn',
	'mt eden', 'eden', 'mount', 'cbd', 'city centre',
	# Wellington suburbs
	'te aro', 'newtown', 'thorndon', 'kelburn',
	# Christchurch suburbs
	'riccarton', 'ilam', 'merivale',
)

# British and American spellings are separate entries on purpose
VEHICLE_COLORS: Tuple[str, ...] = (
	'white', 'black', 'silver', 'grey', 'gray', 'red', 'blue', 'green',
	'yellow', 'orange', 'brown', 'gold', 'beige', 'purple', 'pink',
)

# Canonical condition label -> trigger phrases (substring match, table order)
CONDITION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
	'New': ('new', 'brand new'),
	'Like New': ('like new', 'excellent', 'mint', 'pristine', 'vintage', 'classic', 'retro'),
	'Good': ('good', 'good condition', 'well maintained'),
	'Fair': ('fair', 'fair condition', 'used'),
}

# Camera/electronics brands; never stripped from the keyword query
CAMERA_BRANDS: Tuple[str, ...] = (
	'canon', 'nikon', 'sony', 'fujifilm', 'olympus', 'panasonic',
	'leica', 'pentax', 'hasselblad', 'gopro', 'dji',
)

# Words removed from the keyword query because they carry no search meaning
FILLER_WORDS: Tuple[str, ...] = (
	'find', 'show', 'search', 'looking for', 'want', 'need',
	'near', 'in', 'at', 'around', 'from',
	'me', 'a', 'an', 'the',
)

# Tokens that end a model name
MODEL_STOP_WORDS: Tuple[str, ...] = (
	'after', 'before', 'from', 'in', 'near', 'under', 'below', 'with', 'around', 'between', 'to',
)

# Prepositions that may introduce a place name
LOCATION_PREPOSITIONS: Tuple[str, ...] = ('in', 'near', 'at', 'around', 'from')

VEHICLE_CONTEXT_WORDS: Tuple[str, ...] = (
	'car', 'cars', 'vehicle', 'vehicles', 'truck', 'trucks', 'suv', 'suvs',
	'van', 'vans', 'ute', 'utes', 'sedan', 'hatchback', 'wagon', 'coupe',
	'motorbike', 'motorcycle',
)

MILEAGE_CONTEXT_WORDS: Tuple[str, ...] = (
	'mileage', 'odometer', 'km', 'kms', 'kilometer', 'kilometers', 'kilometre', 'kilometres',
)

# Category slug -> keywords. Only consulted when category detection is switched on.
CATEGORY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
	'electronics': (
		'camera', 'cameras', 'dslr', 'mirrorless', 'canon', 'nikon', 'sony camera',
		'phone', 'iphone', 'samsung', 'smartphone', 'mobile',
		'laptop', 'macbook', 'computer', 'pc', 'desktop',
		'tablet', 'ipad', 'kindle',
		'headphones', 'earbuds', 'airpods', 'headset',
		'tv', 'television', 'monitor', 'screen',
		'console', 'playstation', 'xbox', 'nintendo', 'gaming',
		'speaker', 'bluetooth speaker', 'soundbar',
		'watch', 'smartwatch', 'apple watch',
	),
	'furniture': (
		'sofa', 'couch', 'chair', 'table', 'desk', 'bed', 'mattress',
		'cabinet', 'wardrobe', 'shelf', 'shelving', 'bookshelf',
		'dining table', 'coffee table', 'bedframe',
	),
	'fashion': (
		'shoes', 'sneakers', 'boots', 'dress', 'shirt', 'pants', 'jeans',
		'jacket', 'coat', 'sweater', 'hoodie', 'bag', 'handbag', 'backpack',
	),
	'sports': (
		'bike', 'bicycle', 'cycling', 'treadmill', 'weights', 'dumbbells',
		'golf', 'surfboard', 'skateboard', 'kayak', 'ski', 'snowboard',
	),
	'home': (
		'appliance', 'fridge', 'refrigerator', 'washing machine', 'dryer',
		'microwave', 'oven', 'dishwasher', 'vacuum', 'heater', 'fan',
	),
	'vehicles': (
		'car', 'cars', 'vehicle', 'vehicles', 'auto', 'automobile',
		'truck', 'trucks', 'suv', 'suvs', 'van', 'vans', 'ute', 'utes',
		'sedan', 'hatchback', 'coupe', 'convertible', 'wagon',
		'motorcycle', 'motorbike', 'scooter', 'moped',
		'boat', 'boats', 'caravan', 'caravans', 'motorhome', 'campervan',
	),
}
