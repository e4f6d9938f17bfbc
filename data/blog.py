"""Blog posts.  Bodies are plain paragraphs separated by blank lines."""

from datetime import date

from maco.content.models import BlogPost

BLOG_POSTS: list[BlogPost] = [
    BlogPost(
        id="1",
        slug="making-tax-digital-smes-2024",
        title="Making Tax Digital: What SMEs Need to Know for 2024",
        excerpt=(
            "Essential guide for small businesses preparing for Making Tax Digital requirements. "
            "Learn about software compliance, record-keeping, and deadlines."
        ),
        content=(
            "Making Tax Digital (MTD) is one of the most significant changes to UK tax compliance "
            "in recent years. Small and medium-sized businesses need to understand their "
            "obligations and prepare accordingly.\n\n"
            "MTD requires businesses to keep digital records of income and expenses, use "
            "compatible software to submit VAT returns, and send quarterly updates to HMRC.\n\n"
            "Self-employed people and landlords will follow with MTD for Income Tax, which adds "
            "quarterly updates on 5 August, 5 November, 5 February and 5 May.\n\n"
            "Choose compatible software early, digitise your existing records and set up a "
            "quarterly routine. We can help with software selection, migration and ongoing "
            "submissions."
        ),
        author="Michael Anderson",
        published_at=date(2024, 3, 15),
        tags=["Tax", "MTD", "Compliance", "SME"],
        reading_time=8,
    ),
    BlogPost(
        id="2",
        slug="rd-tax-credits-tech-companies-2024",
        title="R&D Tax Credits: Maximising Claims for Tech Companies",
        excerpt=(
            "How technology companies can maximise R&D tax credit claims. Qualifying activities, "
            "documentation requirements, and common pitfalls to avoid."
        ),
        content=(
            "Many software companies carry out qualifying research and development without "
            "realising it. Resolving technological uncertainty is the test, not working in a lab.\n\n"
            "Keep contemporaneous records of the uncertainty you faced, the approaches you tried "
            "and the staff time involved. Good documentation is what makes a claim robust.\n\n"
            "Common pitfalls include claiming routine development, missing subcontractor costs "
            "and filing after the two-year deadline."
        ),
        author="David Martinez",
        published_at=date(2024, 3, 10),
        tags=["R&D", "Tax Credits", "Technology", "Innovation"],
        reading_time=12,
    ),
    BlogPost(
        id="3",
        slug="cash-flow-management-growing-businesses",
        title="Cash Flow Management: Essential Tips for Growing Businesses",
        excerpt=(
            "Practical strategies for managing cash flow during business growth. Forecasting "
            "techniques, invoice management, and avoiding cash flow crises."
        ),
        content=(
            "Profitable businesses still fail when cash runs out. Growth ties up cash in stock, "
            "staff and unpaid invoices before any profit arrives.\n\n"
            "A rolling 13-week cash forecast, prompt invoicing and agreed payment terms are the "
            "simplest controls with the biggest effect.\n\n"
            "Review the forecast weekly and act early: arranging finance before it is needed is "
            "always cheaper."
        ),
        author="Sarah Collins",
        published_at=date(2024, 3, 5),
        tags=["Cash Flow", "Business Growth", "Financial Management"],
        reading_time=10,
    ),
    BlogPost(
        id="4",
        slug="corporation-tax-changes-2024-directors",
        title="Corporation Tax Changes 2024: What Directors Need to Know",
        excerpt=(
            "Latest corporation tax rate changes and implications for company directors. Tax "
            "planning strategies and dividend vs salary considerations."
        ),
        content=(
            "The main rate of Corporation Tax is 25% for profits over £250,000, with the 19% "
            "small profits rate below £50,000 and marginal relief in between.\n\n"
            "Directors should revisit their salary and dividend mix, since the dividend "
            "allowance has also fallen.\n\n"
            "Pension contributions made by the company remain one of the most tax-efficient "
            "ways to extract value."
        ),
        author="Michael Anderson",
        published_at=date(2024, 2, 28),
        tags=["Corporation Tax", "Directors", "Tax Planning", "2024"],
        reading_time=15,
    ),
    BlogPost(
        id="5",
        slug="choosing-accounting-software-business-2024",
        title="Choosing the Right Accounting Software for Your Business",
        excerpt=(
            "Comprehensive comparison of Xero, QuickBooks, and FreeAgent. Features, pricing, and "
            "which software suits different business types."
        ),
        content=(
            "Xero suits growing companies that want a large app ecosystem. QuickBooks offers "
            "strong reporting, and FreeAgent is built for freelancers and small businesses.\n\n"
            "All three are MTD compatible and connect to UK bank feeds.\n\n"
            "Pick the package that matches how you invoice and who needs access, then migrate at "
            "a period end."
        ),
        author="Sarah Collins",
        published_at=date(2024, 2, 20),
        tags=["Software", "Xero", "QuickBooks", "FreeAgent"],
        reading_time=6,
    ),
    BlogPost(
        id="6",
        slug="vat-flat-rate-scheme-guide-2024",
        title="VAT Flat Rate Scheme: Is It Right for Your Business?",
        excerpt=(
            "Complete guide to the VAT Flat Rate Scheme. Eligibility, benefits, calculations, and "
            "when to consider leaving the scheme."
        ),
        content=(
            "Under the Flat Rate Scheme you pay a fixed percentage of VAT-inclusive turnover "
            "instead of calculating input and output VAT.\n\n"
            "Businesses with few purchases can lose out because of the limited cost trader rate, "
            "so run the numbers before joining.\n\n"
            "You must leave the scheme when turnover passes £230,000."
        ),
        author="David Martinez",
        published_at=date(2024, 2, 15),
        tags=["VAT", "Flat Rate Scheme", "Tax Planning"],
        reading_time=9,
    ),
]
