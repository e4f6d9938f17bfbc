"""Client testimonials shown on the home and testimonials pages."""

from maco.content.models import Testimonial

TESTIMONIALS: list[Testimonial] = [
    Testimonial(
        id="1",
        name="Sarah Johnson",
        company="Johnson Construction Ltd",
        role="Managing Director",
        content=(
            "MA & CO transformed our bookkeeping and CIS compliance. We now save 20+ hours "
            "monthly and never worry about HMRC deadlines."
        ),
        rating=5,
        location="Croydon",
    ),
    Testimonial(
        id="2",
        name="David Chen",
        company="TechStart Solutions",
        role="Founder",
        content=(
            "Exceptional R&D tax credit service. They secured £45,000 in credits we didn't "
            "know we were eligible for."
        ),
        rating=5,
        location="London",
    ),
    Testimonial(
        id="3",
        name="Emma Thompson",
        company="Thompson Retail Group",
        role="Finance Director",
        content=(
            "Outstanding payroll and VAT services. Real-time reporting and MTD compliance "
            "made our operations so much smoother."
        ),
        rating=5,
        location="Surrey",
    ),
    Testimonial(
        id="4",
        name="James Wilson",
        company="Wilson Marketing Agency",
        role="CEO",
        content=(
            "Professional, reliable, and always available when we need them. Their monthly "
            "management accounts help us make better business decisions."
        ),
        rating=5,
        location="Brighton",
    ),
    Testimonial(
        id="5",
        name="Rachel Green",
        company="Green Consulting",
        role="Managing Partner",
        content=(
            "MA & CO handled our company formation and ongoing compliance perfectly. Their "
            "proactive approach sets them apart."
        ),
        rating=5,
        location="Manchester",
    ),
    Testimonial(
        id="6",
        name="Michael Brown",
        company="Brown & Associates",
        role="Director",
        content=(
            "Switched to MA & CO last year and it's been brilliant. Quick response times have "
            "improved our financial management significantly."
        ),
        rating=5,
        location="Birmingham",
    ),
    Testimonial(
        id="7",
        name="Lisa Parker",
        company="Parker Fitness Studio",
        role="Owner",
        content=(
            "As a small business owner, I need accountants who understand my challenges. "
            "Personal service with big firm expertise."
        ),
        rating=4,
        location="Leeds",
    ),
]
