"""
Static section catalog.

The default-settings table is part of the persisted document contract:
keys and values must stay identical to what existing designs were saved
with.
"""
import copy
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict


class SectionType(str, Enum):
    hero = "hero"
    featured_products = "featured_products"
    product_grid = "product_grid"
    about = "about"
    faq = "faq"
    video = "video"
    gallery = "gallery"
    testimonials = "testimonials"
    cta = "cta"
    stats = "stats"
    social_links = "social_links"
    category_showcase = "category_showcase"
    trust_badges = "trust_badges"
    divider = "divider"
    custom_text = "custom_text"
    countdown_timer = "countdown_timer"
    pricing_table = "pricing_table"
    image_slider = "image_slider"
    flip_box = "flip_box"
    icon_box_grid = "icon_box_grid"
    progress_bar = "progress_bar"
    tabs = "tabs"
    accordion = "accordion"
    before_after = "before_after"
    marquee = "marquee"
    logo_grid = "logo_grid"
    map = "map"
    contact_form = "contact_form"
    newsletter = "newsletter"
    team = "team"
    timeline = "timeline"
    animated_counter = "animated_counter"
    alert_banner = "alert_banner"
    blockquote = "blockquote"
    video_playlist = "video_playlist"


SECTION_TYPES = frozenset(t.value for t in SectionType)

DEFAULT_THEME_PRESET = "minimal-white"


DEFAULT_GLOBAL_STYLES: Dict[str, Any] = {
    "primaryColor": "#000000",
    "secondaryColor": "#ffffff",
    "backgroundColor": "#ffffff",
    "textColor": "#111111",
    "fontFamily": "Inter",
}


DEFAULT_SECTION_STYLES: Dict[str, Any] = {
    "padding": {"top": "48", "bottom": "48", "left": "24", "right": "24"},
    "margin": {"top": "0", "bottom": "0"},
    "borderRadius": "0",
    "border": {"width": "0", "color": "#e5e7eb", "style": "solid"},
    "boxShadow": "none",
    "backgroundGradient": {"enabled": False, "from": "#ffffff", "to": "#f3f4f6", "direction": "180deg"},
    "backgroundImage": {"url": "", "overlay": "#000000", "overlayOpacity": 0},
    "backgroundVideo": "",
    "animation": "none",
    "fullWidth": True,
    "responsiveVisibility": {"desktop": True, "tablet": True, "mobile": True},
    "customClass": "",
    "sectionId": "",
}


SECTION_LABELS: Dict[str, Dict[str, str]] = {
    "hero": {"label": "Hero Banner", "icon": "🖼️", "description": "Full-width banner with heading and CTA", "category": "Layout"},
    "featured_products": {"label": "Featured Products", "icon": "⭐", "description": "Showcase selected products", "category": "Commerce"},
    "product_grid": {"label": "Product Grid", "icon": "📦", "description": "All products with filters", "category": "Commerce"},
    "about": {"label": "About / Bio", "icon": "👤", "description": "About the seller with image", "category": "Content"},
    "faq": {"label": "FAQ", "icon": "❓", "description": "Expandable questions and answers", "category": "Content"},
    "video": {"label": "Video Embed", "icon": "🎬", "description": "YouTube or custom video", "category": "Media"},
    "gallery": {"label": "Image Gallery", "icon": "🖼️", "description": "Multi-image showcase", "category": "Media"},
    "testimonials": {"label": "Testimonials", "icon": "💬", "description": "Customer reviews showcase", "category": "Social Proof"},
    "cta": {"label": "Call to Action", "icon": "📢", "description": "Email capture or CTA button", "category": "Conversion"},
    "stats": {"label": "Stats Counter", "icon": "📊", "description": "Animated statistics", "category": "Social Proof"},
    "social_links": {"label": "Social Links", "icon": "🔗", "description": "Social media links bar", "category": "Content"},
    "category_showcase": {"label": "Categories", "icon": "🏷️", "description": "Browse by category", "category": "Commerce"},
    "trust_badges": {"label": "Trust Badges", "icon": "🛡️", "description": "Security & trust indicators", "category": "Social Proof"},
    "divider": {"label": "Divider / Spacer", "icon": "➖", "description": "Visual separator", "category": "Layout"},
    "custom_text": {"label": "Custom Text", "icon": "📝", "description": "Free-form rich text block", "category": "Content"},
    "countdown_timer": {"label": "Countdown Timer", "icon": "⏰", "description": "Urgency timer with end date", "category": "Conversion"},
    "pricing_table": {"label": "Pricing Table", "icon": "💰", "description": "Side-by-side plan comparison", "category": "Commerce"},
    "image_slider": {"label": "Image Slider", "icon": "🎠", "description": "Auto-sliding image carousel", "category": "Media"},
    "flip_box": {"label": "Flip Box", "icon": "🔄", "description": "Card that flips on hover", "category": "Interactive"},
    "icon_box_grid": {"label": "Icon Box Grid", "icon": "⬜", "description": "Grid of icon+title+description cards", "category": "Content"},
    "progress_bar": {"label": "Progress Bar", "icon": "📈", "description": "Animated progress bars", "category": "Content"},
    "tabs": {"label": "Tabs Section", "icon": "📑", "description": "Tabbed content panels", "category": "Content"},
    "accordion": {"label": "Accordion", "icon": "🪗", "description": "Collapsible content blocks", "category": "Content"},
    "before_after": {"label": "Before/After", "icon": "↔️", "description": "Drag slider comparing images", "category": "Interactive"},
    "marquee": {"label": "Marquee / Ticker", "icon": "📜", "description": "Auto-scrolling text or logos", "category": "Content"},
    "logo_grid": {"label": "Logo Grid", "icon": "🏢", "description": "Partner/client logos", "category": "Social Proof"},
    "map": {"label": "Map / Location", "icon": "📍", "description": "Embedded map with pin", "category": "Content"},
    "contact_form": {"label": "Contact Form", "icon": "✉️", "description": "Name, email, message form", "category": "Conversion"},
    "newsletter": {"label": "Newsletter Signup", "icon": "📧", "description": "Email input for list building", "category": "Conversion"},
    "team": {"label": "Team / Staff", "icon": "👥", "description": "Team member cards", "category": "Content"},
    "timeline": {"label": "Timeline", "icon": "📅", "description": "Milestones and history", "category": "Content"},
    "animated_counter": {"label": "Animated Counter", "icon": "🔢", "description": "Numbers that count up on scroll", "category": "Social Proof"},
    "alert_banner": {"label": "Alert / Banner", "icon": "🔔", "description": "Dismissible announcement bar", "category": "Conversion"},
    "blockquote": {"label": "Blockquote", "icon": "💭", "description": "Styled quote with author", "category": "Content"},
    "video_playlist": {"label": "Video Playlist", "icon": "📺", "description": "Multiple videos with navigation", "category": "Media"},
}


def countdown_end_date(days: int, now: datetime | None = None) -> str:
    """Countdown end dates are stored as minute-precision ISO strings."""
    now = now or datetime.now(timezone.utc)
    return (now + timedelta(days=days)).strftime("%Y-%m-%dT%H:%M")


# countdown_timer.endDate is filled in by default_settings() at creation time
DEFAULT_SECTION_SETTINGS: Dict[str, Dict[str, Any]] = {
    "hero": {"heading": "Welcome to Our Store", "subheading": "Discover amazing products", "bgColor": "#000000", "textColor": "#ffffff", "ctaText": "Shop Now", "ctaLink": "#products", "textAlign": "center", "bgImage": ""},
    "featured_products": {"title": "Featured Products", "productIds": [], "columns": 3},
    "product_grid": {"title": "All Products", "columns": 3, "showFilters": True, "sortBy": "popular"},
    "about": {"title": "About Us", "text": "Tell your story here...", "imageUrl": "", "imagePosition": "right"},
    "faq": {"title": "FAQ", "items": [{"question": "How does delivery work?", "answer": "After purchase, you will receive your product instantly."}]},
    "video": {"title": "Watch", "videoUrl": "", "autoplay": False},
    "gallery": {"title": "Gallery", "images": [], "columns": 3},
    "testimonials": {"title": "What Customers Say", "items": [{"name": "Happy Customer", "text": "Great products!", "rating": 5}]},
    "cta": {"heading": "Ready to Get Started?", "subheading": "Join thousands of happy customers", "buttonText": "Shop Now", "buttonLink": "#products", "bgColor": "#000000", "textColor": "#ffffff"},
    "stats": {"items": [{"label": "Happy Customers", "value": "500+", "icon": "😊"}, {"label": "Products Sold", "value": "1000+", "icon": "📦"}]},
    "social_links": {"links": []},
    "category_showcase": {"title": "Browse Categories", "columns": 3},
    "trust_badges": {"badges": ["secure_checkout", "instant_delivery", "money_back", "support_24_7"]},
    "divider": {"height": 40, "style": "line"},
    "custom_text": {"content": "<p>Your custom content here</p>", "textAlign": "left"},
    "countdown_timer": {"title": "Limited Time Offer!", "endDate": "", "expireAction": "hide", "bgColor": "#ef4444", "textColor": "#ffffff", "showDays": True, "showHours": True, "showMinutes": True, "showSeconds": True},
    "pricing_table": {"title": "Choose Your Plan", "plans": [
        {"name": "Basic", "price": "$9", "period": "/mo", "features": ["Feature 1", "Feature 2"], "recommended": False, "ctaText": "Get Started", "ctaLink": "#"},
        {"name": "Pro", "price": "$29", "period": "/mo", "features": ["Feature 1", "Feature 2", "Feature 3", "Priority Support"], "recommended": True, "ctaText": "Get Pro", "ctaLink": "#", "badge": "Popular"},
        {"name": "Enterprise", "price": "$99", "period": "/mo", "features": ["Everything in Pro", "Custom Solutions", "Dedicated Support"], "recommended": False, "ctaText": "Contact Us", "ctaLink": "#"},
    ]},
    "image_slider": {"images": [], "autoplay": True, "interval": 4000, "showDots": True, "showArrows": True, "height": 400},
    "flip_box": {"items": [
        {"frontTitle": "Feature", "frontIcon": "🚀", "frontBg": "#3b82f6", "backTitle": "Details", "backText": "Learn more about this amazing feature", "backCtaText": "Learn More", "backCtaLink": "#"},
        {"frontTitle": "Quality", "frontIcon": "✨", "frontBg": "#8b5cf6", "backTitle": "Premium", "backText": "We deliver premium quality products", "backCtaText": "See More", "backCtaLink": "#"},
        {"frontTitle": "Support", "frontIcon": "💬", "frontBg": "#10b981", "backTitle": "24/7 Help", "backText": "Round the clock assistance", "backCtaText": "Contact", "backCtaLink": "#"},
    ], "columns": 3},
    "icon_box_grid": {"title": "Our Features", "items": [
        {"icon": "🚀", "title": "Fast Delivery", "description": "Get your products instantly"},
        {"icon": "🔒", "title": "Secure Payment", "description": "Your data is safe with us"},
        {"icon": "⭐", "title": "Top Quality", "description": "Only the best products"},
        {"icon": "💬", "title": "24/7 Support", "description": "Always here to help"},
    ], "columns": 4, "iconSize": "large"},
    "progress_bar": {"title": "Our Skills", "items": [
        {"label": "Design", "value": 95, "color": "#3b82f6"},
        {"label": "Development", "value": 88, "color": "#10b981"},
        {"label": "Marketing", "value": 76, "color": "#f59e0b"},
    ], "animated": True, "showPercentage": True},
    "tabs": {"items": [
        {"label": "Tab 1", "title": "First Section", "content": "Content for the first tab goes here."},
        {"label": "Tab 2", "title": "Second Section", "content": "Content for the second tab goes here."},
        {"label": "Tab 3", "title": "Third Section", "content": "Content for the third tab goes here."},
    ], "orientation": "horizontal", "variant": "default"},
    "accordion": {"title": "More Information", "items": [
        {"title": "Section 1", "content": "Content for section 1."},
        {"title": "Section 2", "content": "Content for section 2."},
    ], "allowMultiple": False, "variant": "bordered"},
    "before_after": {"title": "Before & After", "beforeImage": "", "afterImage": "", "beforeLabel": "Before", "afterLabel": "After", "orientation": "horizontal"},
    "marquee": {"items": ["🎉 Special Offer!", "🔥 Limited Time Deal", "⭐ New Products Available", "💰 Free Shipping"], "speed": 30, "direction": "left", "pauseOnHover": True, "variant": "text"},
    "logo_grid": {"title": "Trusted By", "logos": [], "columns": 4, "grayscale": True, "showLinks": False},
    "map": {"title": "Find Us", "address": "", "embedUrl": "", "height": 400, "zoom": 15},
    "contact_form": {"title": "Contact Us", "subtitle": "We'd love to hear from you", "fields": ["name", "email", "message"], "submitText": "Send Message", "successMessage": "Thank you! We'll get back to you soon."},
    "newsletter": {"title": "Stay Updated", "subtitle": "Subscribe to our newsletter", "placeholder": "Enter your email", "buttonText": "Subscribe", "bgColor": "#000000", "textColor": "#ffffff"},
    "team": {"title": "Meet Our Team", "members": [
        {"name": "John Doe", "role": "Founder", "image": "", "socials": {"twitter": "", "linkedin": ""}},
        {"name": "Jane Smith", "role": "Designer", "image": "", "socials": {"twitter": "", "linkedin": ""}},
    ], "columns": 3, "variant": "card"},
    "timeline": {"title": "Our Journey", "items": [
        {"year": "2020", "title": "Founded", "description": "We started our journey"},
        {"year": "2022", "title": "Growth", "description": "Reached 1000 customers"},
        {"year": "2024", "title": "Today", "description": "Continuing to innovate"},
    ], "variant": "alternating"},
    "animated_counter": {"items": [
        {"value": 1500, "suffix": "+", "label": "Happy Customers", "icon": "😊"},
        {"value": 5000, "suffix": "+", "label": "Products Sold", "icon": "📦"},
        {"value": 99, "suffix": "%", "label": "Satisfaction", "icon": "⭐"},
        {"value": 24, "suffix": "/7", "label": "Support", "icon": "💬"},
    ], "duration": 2000, "columns": 4},
    "alert_banner": {"message": "🎉 Special Offer: Get 20% off with code SAVE20!", "type": "promo", "dismissible": True, "bgColor": "#fef3c7", "textColor": "#92400e", "linkText": "Shop Now", "linkUrl": "#products"},
    "blockquote": {"quote": "The best investment you can make is in yourself.", "author": "Warren Buffett", "authorTitle": "Investor", "variant": "large", "decorative": True},
    "video_playlist": {"title": "Video Gallery", "videos": [
        {"title": "Introduction", "url": "", "thumbnail": ""},
        {"title": "Tutorial", "url": "", "thumbnail": ""},
    ], "layout": "sidebar", "autoplay": False},
}


def is_section_type(value) -> bool:
    return isinstance(value, str) and value in SECTION_TYPES


def default_settings(section_type: str, now: datetime | None = None) -> Dict[str, Any]:
    """Fresh deep copy of the default settings for `section_type`."""
    settings = copy.deepcopy(DEFAULT_SECTION_SETTINGS[section_type])
    if section_type == SectionType.countdown_timer.value:
        settings["endDate"] = countdown_end_date(7, now)
    return settings


def default_styles() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_SECTION_STYLES)


def default_global_styles() -> Dict[str, Any]:
    return copy.deepcopy(DEFAULT_GLOBAL_STYLES)


def catalog_entries():
    """Section types grouped by category, in declaration order."""
    grouped: Dict[str, list] = {}
    for section_type in SectionType:
        info = SECTION_LABELS[section_type.value]
        grouped.setdefault(info["category"], []).append({"type": section_type.value, **info})
    return grouped
