# =============================================================================
# core/content.py - Site Content
# =============================================================================
# Copy shown on the brochure pages: business details, product categories,
# the product gallery, company values and achievements.
#
# Kept as plain data so templates stay free of text.
# =============================================================================

BUSINESS = {
    "name": "L P Sanitary",
    "tagline": "Premium Sanitaryware Solutions",
    "address": (
        "shop no. 5,6 jc tower, chhatrapati shivaji raje chowk amli vapi, "
        "Silvassa - Vapi Rd, Silvassa, Dadra and Nagar Haveli and Daman and Diu 396230"
    ),
    "phones": ["+91 9016430575", "+91 9426877975"],
    "email": "lpsanitary111@gmail.com",
    "hours": "Monday - Saturday",
    "founded": 1999,
}

NAV_LINKS = [
    {"href": "/", "label": "Home"},
    {"href": "/products", "label": "Products"},
    {"href": "/about", "label": "About"},
    {"href": "/contact", "label": "Contact"},
]

FOOTER_BRANDS = ["Roff", "Jaquar", "Blues", "Hindware", "Kohler"]

CATEGORIES = [
    {
        "title": "Bathroom Fixtures",
        "description": "Premium toilets, basins, and bidets from leading manufacturers",
    },
    {
        "title": "Kitchen Sinks",
        "description": "Durable and stylish kitchen sinks in various materials and designs",
    },
    {
        "title": "Faucets & Taps",
        "description": "Designer faucets and taps with superior functionality and style",
    },
    {
        "title": "Shower Systems",
        "description": "Complete shower solutions including panels, heads, and accessories",
    },
    {
        "title": "Bathroom Accessories",
        "description": "Complete your bathroom with our range of premium accessories",
    },
    {
        "title": "Tiles & Flooring",
        "description": "Beautiful tiles and flooring solutions for modern bathrooms",
    },
]

REASONS = [
    {
        "title": "Premium Quality",
        "description": "We only deal with the finest brands and highest quality products in the industry",
    },
    {
        "title": "Fast Delivery",
        "description": "Quick and reliable delivery across India with careful packaging and handling",
    },
    {
        "title": "Expert Support",
        "description": "Our experienced team provides professional guidance and after-sales support",
    },
    {
        "title": "Competitive Pricing",
        "description": "Best wholesale and retail prices with transparent quotations",
    },
    {
        "title": "Genuine Products",
        "description": "All products are 100% genuine with manufacturer warranties",
    },
    {
        "title": "25+ Years Experience",
        "description": "Over two decades of experience in the sanitaryware industry",
    },
]

PRODUCTS = [
    {"id": 1, "name": "Premium Wall Hung Toilet", "brand": "Jaquar", "category": "Bathroom Fixtures"},
    {"id": 2, "name": "Stainless Steel Kitchen Sink", "brand": "Roff", "category": "Kitchen Sinks"},
    {"id": 3, "name": "Designer Basin Mixer", "brand": "Blues", "category": "Faucets & Taps"},
    {"id": 4, "name": "Rainfall Shower Head", "brand": "Hindware", "category": "Shower Systems"},
    {"id": 5, "name": "Ceramic Pedestal Basin", "brand": "Kohler", "category": "Bathroom Fixtures"},
    {"id": 6, "name": "Towel Bar Set", "brand": "Parryware", "category": "Bathroom Accessories"},
    {"id": 7, "name": "Marble Pattern Tiles", "brand": "Cera", "category": "Tiles & Flooring"},
    {"id": 8, "name": "Single Lever Kitchen Tap", "brand": "Roff", "category": "Faucets & Taps"},
    {"id": 9, "name": "Corner Basin", "brand": "Jaquar", "category": "Bathroom Fixtures"},
    {"id": 10, "name": "Shower Panel System", "brand": "Blues", "category": "Shower Systems"},
    {"id": 11, "name": "Soap Dispenser Set", "brand": "Hindware", "category": "Bathroom Accessories"},
    {"id": 12, "name": "Double Bowl Kitchen Sink", "brand": "Kohler", "category": "Kitchen Sinks"},
]

VALUES = [
    {
        "title": "Quality Excellence",
        "description": "We never compromise on quality and only offer products that meet the highest standards.",
    },
    {
        "title": "Customer First",
        "description": "Our customers are at the heart of everything we do, and their satisfaction is our priority.",
    },
    {
        "title": "Integrity",
        "description": "We conduct business with honesty, transparency, and ethical practices.",
    },
    {
        "title": "Innovation",
        "description": "We embrace new technologies and trends to bring the latest solutions to our customers.",
    },
    {
        "title": "Teamwork",
        "description": "We work together as a team to achieve common goals and deliver exceptional results.",
    },
    {
        "title": "Sustainability",
        "description": "We are committed to environmental responsibility and sustainable business practices.",
    },
]

ACHIEVEMENTS = [
    {"number": "25+", "label": "Years of Experience", "description": "Serving customers since 1999"},
    {"number": "50,000+", "label": "Happy Customers", "description": "Satisfied customers across India"},
    {"number": "15+", "label": "Premium Brands", "description": "Authorized dealer partnerships"},
    {"number": "99.5%", "label": "Customer Satisfaction", "description": "Based on customer feedback"},
]


def product_categories() -> list[str]:
    """Distinct product categories in gallery order."""
    seen: list[str] = []
    for product in PRODUCTS:
        if product["category"] not in seen:
            seen.append(product["category"])
    return seen
