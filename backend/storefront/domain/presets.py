"""Theme presets: a global style bundle plus a starter section list."""
import copy
from typing import Any, Dict, List, Optional

from .catalog import countdown_end_date


def _section(section_type, settings, **extra):
    return {"type": section_type, "visible": True, "settings": settings, **extra}


THEME_PRESETS: List[Dict[str, Any]] = [
    {
        "id": "minimal-white",
        "name": "Minimal White",
        "description": "Clean, modern, and minimal",
        "thumbnail": "⬜",
        "globalStyles": {"primaryColor": "#000000", "secondaryColor": "#f5f5f5", "backgroundColor": "#ffffff", "textColor": "#111111", "fontFamily": "Inter"},
        "sections": [
            _section("hero", {"heading": "Welcome", "subheading": "Quality products, curated for you", "bgColor": "#ffffff", "textColor": "#000000", "ctaText": "Browse", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("featured_products", {"title": "Featured", "productIds": [], "columns": 3}),
            _section("product_grid", {"title": "All Products", "columns": 3, "showFilters": True, "sortBy": "popular"}),
            _section("about", {"title": "About", "text": "We create high-quality digital products.", "imageUrl": "", "imagePosition": "right"}),
        ],
    },
    {
        "id": "dark-elegant",
        "name": "Dark Elegant",
        "description": "Sleek dark theme with gold accents",
        "thumbnail": "⬛",
        "globalStyles": {"primaryColor": "#D4AF37", "secondaryColor": "#1a1a2e", "backgroundColor": "#0f0f1a", "textColor": "#f0e6d3", "fontFamily": "DM Sans"},
        "sections": [
            _section("hero", {"heading": "Premium Collection", "subheading": "Exclusive digital products", "bgColor": "#0f0f1a", "textColor": "#D4AF37", "ctaText": "Explore", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("stats", {"items": [{"label": "Products", "value": "50+", "icon": "📦"}, {"label": "Customers", "value": "1K+", "icon": "👥"}, {"label": "Rating", "value": "4.9", "icon": "⭐"}]}),
            _section("featured_products", {"title": "Best Sellers", "productIds": [], "columns": 3}),
            _section("testimonials", {"title": "Reviews", "items": [{"name": "Customer", "text": "Amazing quality!", "rating": 5}]}),
            _section("product_grid", {"title": "Shop All", "columns": 3, "showFilters": True, "sortBy": "popular"}),
        ],
    },
    {
        "id": "bold-colorful",
        "name": "Bold & Colorful",
        "description": "Vibrant gradients and bold typography",
        "thumbnail": "🌈",
        "globalStyles": {"primaryColor": "#FF6B6B", "secondaryColor": "#4ECDC4", "backgroundColor": "#ffffff", "textColor": "#2C3E50", "fontFamily": "Raleway"},
        "sections": [
            _section("hero", {"heading": "🔥 Hot Products", "subheading": "Fresh drops every week", "bgColor": "#FF6B6B", "textColor": "#ffffff", "ctaText": "Shop Now", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("countdown_timer", {"title": "🔥 Flash Sale Ends In", "endDate": "", "bgColor": "#2C3E50", "textColor": "#ffffff", "expireAction": "hide", "showDays": True, "showHours": True, "showMinutes": True, "showSeconds": True}, countdown_days=3),
            _section("category_showcase", {"title": "Categories", "columns": 3}),
            _section("product_grid", {"title": "All Products", "columns": 3, "showFilters": True, "sortBy": "newest"}),
            _section("newsletter", {"title": "Don't Miss Out!", "subtitle": "Follow us for new drops", "placeholder": "Enter your email", "buttonText": "Subscribe", "bgColor": "#4ECDC4", "textColor": "#ffffff"}),
        ],
    },
    {
        "id": "gumroad-classic",
        "name": "Gumroad Classic",
        "description": "Clean Gumroad-inspired layout",
        "thumbnail": "🟡",
        "globalStyles": {"primaryColor": "#FF90E8", "secondaryColor": "#23A094", "backgroundColor": "#ffffff", "textColor": "#000000", "fontFamily": "Inter"},
        "sections": [
            _section("hero", {"heading": "Creator Store", "subheading": "Digital products made with love", "bgColor": "#FF90E8", "textColor": "#000000", "ctaText": "Browse", "ctaLink": "#products", "textAlign": "left", "bgImage": ""}),
            _section("product_grid", {"title": "Products", "columns": 3, "showFilters": False, "sortBy": "popular"}),
            _section("about", {"title": "About the Creator", "text": "Building tools and resources for creators.", "imageUrl": "", "imagePosition": "left"}),
            _section("faq", {"title": "FAQ", "items": [{"question": "How do I get my product?", "answer": "Instant delivery after purchase!"}]}),
        ],
    },
    {
        "id": "neon-glow",
        "name": "Neon Glow",
        "description": "Futuristic neon on dark background",
        "thumbnail": "💜",
        "globalStyles": {"primaryColor": "#00ff88", "secondaryColor": "#ff00ff", "backgroundColor": "#0a0a0a", "textColor": "#e0e0e0", "fontFamily": "DM Sans"},
        "sections": [
            _section("hero", {"heading": "✨ Digital Products", "subheading": "Level up your game", "bgColor": "#0a0a0a", "textColor": "#00ff88", "ctaText": "Enter", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("marquee", {"items": ["🔥 NEW DROPS", "⚡ INSTANT DELIVERY", "💎 PREMIUM QUALITY", "🌟 5-STAR RATED"], "speed": 25, "direction": "left", "pauseOnHover": True}),
            _section("featured_products", {"title": "🔥 Hot Picks", "productIds": [], "columns": 3}),
            _section("trust_badges", {"badges": ["secure_checkout", "instant_delivery", "money_back"]}),
            _section("product_grid", {"title": "All Products", "columns": 3, "showFilters": True, "sortBy": "popular"}),
            _section("social_links", {"links": []}),
        ],
    },
    {
        "id": "agency-pro",
        "name": "Agency Pro",
        "description": "Corporate blue, structured, professional",
        "thumbnail": "🔵",
        "globalStyles": {"primaryColor": "#2563EB", "secondaryColor": "#1E40AF", "backgroundColor": "#ffffff", "textColor": "#1E293B", "fontFamily": "Inter", "headingFont": "DM Sans"},
        "sections": [
            _section("hero", {"heading": "Professional Solutions", "subheading": "Enterprise-grade digital products", "bgColor": "#1E293B", "textColor": "#ffffff", "ctaText": "Get Started", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("icon_box_grid", {"title": "Why Choose Us", "items": [{"icon": "🚀", "title": "Fast Delivery", "description": "Instant access after purchase"}, {"icon": "🔒", "title": "Secure", "description": "Enterprise-grade security"}, {"icon": "📊", "title": "Analytics", "description": "Track your progress"}, {"icon": "💬", "title": "Support", "description": "24/7 expert assistance"}], "columns": 4, "iconSize": "large"}),
            _section("pricing_table", {"title": "Pricing Plans", "plans": [
                {"name": "Starter", "price": "$19", "period": "/mo", "features": ["5 Projects", "Basic Support", "1GB Storage"], "recommended": False, "ctaText": "Start Free", "ctaLink": "#"},
                {"name": "Professional", "price": "$49", "period": "/mo", "features": ["Unlimited Projects", "Priority Support", "10GB Storage", "API Access"], "recommended": True, "ctaText": "Get Pro", "ctaLink": "#", "badge": "Most Popular"},
                {"name": "Enterprise", "price": "$149", "period": "/mo", "features": ["Everything in Pro", "Dedicated Manager", "Custom Solutions", "SLA"], "recommended": False, "ctaText": "Contact Sales", "ctaLink": "#"},
            ]}),
            _section("animated_counter", {"items": [{"value": 5000, "suffix": "+", "label": "Clients", "icon": "👥"}, {"value": 99, "suffix": "%", "label": "Uptime", "icon": "⚡"}, {"value": 150, "suffix": "+", "label": "Countries", "icon": "🌍"}], "duration": 2000, "columns": 3}),
            _section("product_grid", {"title": "Our Products", "columns": 3, "showFilters": True, "sortBy": "popular"}),
            _section("testimonials", {"title": "Client Testimonials", "items": [{"name": "Sarah J.", "text": "Transformed our workflow completely.", "rating": 5}, {"name": "Mike R.", "text": "Best investment for our team.", "rating": 5}]}),
            _section("cta", {"heading": "Ready to Scale?", "subheading": "Join thousands of businesses", "buttonText": "Get Started", "buttonLink": "#", "bgColor": "#2563EB", "textColor": "#ffffff"}),
        ],
    },
    {
        "id": "pastel-dream",
        "name": "Pastel Dream",
        "description": "Soft pastels, rounded, feminine",
        "thumbnail": "🩷",
        "globalStyles": {"primaryColor": "#E879A0", "secondaryColor": "#A78BFA", "backgroundColor": "#FFF5F7", "textColor": "#4A3445", "fontFamily": "Raleway", "defaultBorderRadius": "16"},
        "sections": [
            _section("hero", {"heading": "✨ Dreamy Digital Products", "subheading": "Curated with love for creators", "bgColor": "#FDDDE6", "textColor": "#4A3445", "ctaText": "Explore", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("icon_box_grid", {"title": "What We Offer", "items": [{"icon": "🎨", "title": "Design Templates", "description": "Beautiful, ready-to-use"}, {"icon": "📚", "title": "E-Books", "description": "Learn from experts"}, {"icon": "🎬", "title": "Video Courses", "description": "Step-by-step guides"}], "columns": 3, "iconSize": "large"}),
            _section("featured_products", {"title": "💕 Favorites", "productIds": [], "columns": 3}),
            _section("blockquote", {"quote": "Creativity is intelligence having fun.", "author": "Albert Einstein", "authorTitle": "", "variant": "large", "decorative": True}),
            _section("product_grid", {"title": "All Products", "columns": 3, "showFilters": True, "sortBy": "popular"}),
            _section("newsletter", {"title": "Stay in the Loop 💌", "subtitle": "New arrivals and exclusive offers", "placeholder": "your@email.com", "buttonText": "Subscribe", "bgColor": "#E879A0", "textColor": "#ffffff"}),
        ],
    },
    {
        "id": "cyber-punk",
        "name": "Cyber Punk",
        "description": "Neon pink + cyan on dark, glitch aesthetic",
        "thumbnail": "🟣",
        "globalStyles": {"primaryColor": "#FF0080", "secondaryColor": "#00FFFF", "backgroundColor": "#0D0D0D", "textColor": "#E0E0E0", "fontFamily": "DM Sans"},
        "sections": [
            _section("alert_banner", {"message": "⚡ SYSTEM ONLINE — NEW DROPS LOADING...", "type": "promo", "dismissible": False, "bgColor": "#FF0080", "textColor": "#ffffff", "linkText": "", "linkUrl": ""}),
            _section("hero", {"heading": "ENTER THE MATRIX", "subheading": "Next-gen digital products", "bgColor": "#0D0D0D", "textColor": "#00FFFF", "ctaText": "[ ACCESS ]", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("marquee", {"items": ["🔥 CYBER DEALS", "⚡ INSTANT ACCESS", "💎 PREMIUM GRADE", "🌐 WORLDWIDE"], "speed": 20, "direction": "left", "pauseOnHover": True}),
            _section("progress_bar", {"title": "SYSTEM STATUS", "items": [{"label": "Server Load", "value": 42, "color": "#00FFFF"}, {"label": "Downloads", "value": 87, "color": "#FF0080"}, {"label": "Satisfaction", "value": 99, "color": "#00FF88"}], "animated": True, "showPercentage": True}),
            _section("product_grid", {"title": "PRODUCT DATABASE", "columns": 3, "showFilters": True, "sortBy": "newest"}),
            _section("countdown_timer", {"title": "NEXT DROP IN", "endDate": "", "bgColor": "#1A0A2E", "textColor": "#00FFFF", "expireAction": "show_zeros", "showDays": True, "showHours": True, "showMinutes": True, "showSeconds": True}, countdown_days=5),
        ],
    },
    {
        "id": "nature-organic",
        "name": "Nature Organic",
        "description": "Earth tones, warm, organic shapes",
        "thumbnail": "🌿",
        "globalStyles": {"primaryColor": "#4D7C0F", "secondaryColor": "#A3785C", "backgroundColor": "#FEFDF5", "textColor": "#3C2F1E", "fontFamily": "Raleway", "defaultBorderRadius": "12"},
        "sections": [
            _section("hero", {"heading": "Natural & Handcrafted", "subheading": "Sustainable digital goods for mindful creators", "bgColor": "#E8E4D9", "textColor": "#3C2F1E", "ctaText": "Explore", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("icon_box_grid", {"title": "Our Values", "items": [{"icon": "🌱", "title": "Sustainable", "description": "Eco-friendly practices"}, {"icon": "🤝", "title": "Fair Trade", "description": "Supporting communities"}, {"icon": "♻️", "title": "Zero Waste", "description": "Minimal footprint"}], "columns": 3, "iconSize": "large"}),
            _section("featured_products", {"title": "🌿 Handpicked", "productIds": [], "columns": 3}),
            _section("timeline", {"title": "Our Journey", "items": [{"year": "2020", "title": "Seeds Planted", "description": "Started with a vision for sustainable digital products"}, {"year": "2022", "title": "Community Growth", "description": "Reached 1000 mindful creators"}, {"year": "2024", "title": "Flourishing", "description": "Expanding our impact globally"}], "variant": "alternating"}),
            _section("product_grid", {"title": "All Products", "columns": 3, "showFilters": True, "sortBy": "popular"}),
            _section("trust_badges", {"badges": ["secure_checkout", "instant_delivery", "money_back", "support_24_7"]}),
        ],
    },
    {
        "id": "retro-vintage",
        "name": "Retro Vintage",
        "description": "Cream/brown, serif fonts, classic feel",
        "thumbnail": "📜",
        "globalStyles": {"primaryColor": "#8B4513", "secondaryColor": "#D2691E", "backgroundColor": "#FDF8F0", "textColor": "#3E2723", "fontFamily": "DM Sans", "headingFont": "Raleway"},
        "sections": [
            _section("hero", {"heading": "Classic Collection", "subheading": "Timeless digital products with character", "bgColor": "#3E2723", "textColor": "#FDF8F0", "ctaText": "Discover", "ctaLink": "#products", "textAlign": "center", "bgImage": ""}),
            _section("divider", {"height": 30, "style": "line"}),
            _section("blockquote", {"quote": "Quality is not an act, it is a habit.", "author": "Aristotle", "authorTitle": "Philosopher", "variant": "large", "decorative": True}),
            _section("featured_products", {"title": "✦ Editor's Choice", "productIds": [], "columns": 3}),
            _section("team", {"title": "The Artisans", "members": [{"name": "James W.", "role": "Founder & Curator", "image": "", "socials": {}}, {"name": "Emma R.", "role": "Lead Designer", "image": "", "socials": {}}], "columns": 2, "variant": "card"}),
            _section("product_grid", {"title": "Full Catalog", "columns": 3, "showFilters": True, "sortBy": "popular"}),
            _section("newsletter", {"title": "Join Our Chronicle", "subtitle": "Receive curated picks weekly", "placeholder": "Enter your email", "buttonText": "Subscribe", "bgColor": "#8B4513", "textColor": "#FDF8F0"}),
        ],
    },
]

_PRESETS_BY_ID = {preset["id"]: preset for preset in THEME_PRESETS}


def get_preset(preset_id: str) -> Optional[Dict[str, Any]]:
    return _PRESETS_BY_ID.get(preset_id)


def preset_sections(preset: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Deep copies of a preset's sections, without ids or order."""
    sections = []
    for entry in preset["sections"]:
        section = copy.deepcopy(entry)
        days = section.pop("countdown_days", None)
        if days is not None:
            section["settings"]["endDate"] = countdown_end_date(days)
        sections.append(section)
    return sections


def list_presets() -> List[Dict[str, Any]]:
    return [
        {
            "id": preset["id"],
            "name": preset["name"],
            "description": preset["description"],
            "thumbnail": preset["thumbnail"],
            "globalStyles": copy.deepcopy(preset["globalStyles"]),
            "section_types": [s["type"] for s in preset["sections"]],
        }
        for preset in THEME_PRESETS
    ]
