"""Service catalogue, grouped by category in display order."""

from maco.content.models import FAQ, CaseStudy, Service, ServiceCategory

SERVICES: list[Service] = [
    # --- Compliance & core accounting ---
    Service(
        id="bookkeeping",
        slug="bookkeeping",
        title="Bookkeeping Services",
        description=(
            "Professional bookkeeping services with automated transaction coding, bank "
            "reconciliations, CIS allocation, and HMRC MTD compliance for UK businesses."
        ),
        meta_title="Professional Bookkeeping Services | MA & CO Accountants",
        meta_description=(
            "Expert bookkeeping services in Croydon. Automated coding, reconciliations, "
            "CIS, bank feeds & HMRC MTD compliance."
        ),
        category=ServiceCategory.compliance,
        icon="BookOpen",
        features=[
            "Automated transaction coding and categorisation",
            "Daily bank reconciliations with multi-bank support",
            "CIS allocation and subcontractor management",
            "Real-time bank feeds integration",
            "Digital receipt capture and processing",
            "VAT reconciliation and preparation",
            "Monthly management reporting",
            "HMRC Making Tax Digital compliance",
        ],
        benefits=[
            "Save 15+ hours per month on manual data entry",
            "Reduce errors with automated processes",
            "Real-time financial visibility",
            "HMRC compliant digital records",
            "Improved cash flow management",
        ],
        case_study=CaseStudy(
            title="Construction SME Transformation",
            description=(
                "A Croydon-based construction company struggling with CIS compliance "
                "and manual bookkeeping processes."
            ),
            result=(
                "Reduced monthly bookkeeping time from 40 hours to 8 hours and achieved "
                "full HMRC MTD compliance with automated bank feeds and CIS management."
            ),
        ),
        faqs=[
            FAQ(
                question="What is HMRC Making Tax Digital compliance?",
                answer=(
                    "MTD requires businesses to keep digital records and submit VAT returns "
                    "using compatible software. We ensure your bookkeeping meets every requirement."
                ),
            ),
            FAQ(
                question="What is CIS and why is it important?",
                answer=(
                    "The Construction Industry Scheme requires contractors to deduct tax from "
                    "subcontractor payments. We handle CIS calculations, allocations and monthly returns."
                ),
            ),
        ],
    ),
    Service(
        id="payroll",
        slug="payroll",
        title="Payroll Services",
        description=(
            "Complete payroll management including RTI submissions, auto-enrolment pensions, "
            "P45/P60 processing, and director payroll optimisation."
        ),
        meta_title="Payroll Services & RTI Submissions | MA & CO Accountants",
        meta_description="Professional payroll services. RTI submissions, auto-enrolment pensions, P45/P60 processing.",
        category=ServiceCategory.compliance,
        icon="Users",
        features=[
            "Monthly payroll processing",
            "Real Time Information (RTI) submissions to HMRC",
            "Auto-enrolment pension scheme management",
            "P45, P60 and P11D preparation",
            "Director payroll and dividend optimisation",
            "Statutory pay calculations (SSP, SMP, SPP)",
            "Year-end payroll reconciliation",
            "Employee self-service portal",
        ],
        benefits=[
            "Full HMRC compliance",
            "Reduce payroll processing time by 80%",
            "Tax-efficient director remuneration",
            "Automated pension contributions",
            "Real-time payroll reporting",
        ],
        case_study=CaseStudy(
            title="Tech Startup Growth",
            description="A London startup needed a payroll solution that scaled with hiring.",
            result="Saved £15,000 annually through optimisation and cut processing from 2 days to 4 hours.",
        ),
        faqs=[
            FAQ(
                question="What is RTI?",
                answer="Real Time Information requires payroll to be reported to HMRC every time employees are paid.",
            ),
            FAQ(
                question="How does auto-enrolment work?",
                answer="Eligible employees are automatically enrolled into a workplace pension, with employer contributions.",
            ),
        ],
    ),
    Service(
        id="vat",
        slug="vat",
        title="VAT Services",
        description="Comprehensive VAT services with MTD compliance and scheme optimisation.",
        meta_title="VAT Returns & MTD Compliance | MA & CO Accountants",
        meta_description="Expert VAT services including returns, MTD compliance and flat rate scheme analysis.",
        category=ServiceCategory.compliance,
        icon="Receipt",
        features=[
            "Quarterly VAT returns",
            "MTD compliance",
            "VAT registration",
            "Flat Rate Scheme analysis",
            "Partial exemption calculations",
            "Threshold monitoring",
            "Cross-border VAT",
            "HMRC dispute support",
        ],
        benefits=[
            "MTD compliance",
            "Scheme optimisation",
            "On-time submissions",
            "Expert guidance",
            "Proactive threshold monitoring",
        ],
        case_study=CaseStudy(
            title="E-commerce Optimisation",
            description="An online retailer was overpaying VAT and struggling with MTD.",
            result="The Flat Rate Scheme saved £8,000 a year and compliance time fell by 70%.",
        ),
        faqs=[
            FAQ(
                question="When do I need to register for VAT?",
                answer="Registration is required when taxable turnover exceeds £90,000 in a rolling 12 months.",
            ),
            FAQ(
                question="What is the Flat Rate Scheme?",
                answer="You pay VAT as a fixed percentage of turnover, which often reduces admin and can save money.",
            ),
        ],
    ),
    Service(
        id="software-integration",
        slug="software-integration",
        title="Software Integration",
        description="Expert setup of Xero, FreeAgent and QuickBooks with bank integration.",
        meta_title="Accounting Software Integration | Xero, FreeAgent, QuickBooks",
        meta_description="Professional setup of accounting software with bank integration and automation.",
        category=ServiceCategory.compliance,
        icon="Settings",
        features=[
            "FreeAgent setup",
            "Xero implementation",
            "QuickBooks configuration",
            "Bank feed integration",
            "Receipt automation",
            "Invoice automation",
            "Data migration",
            "Custom reporting",
        ],
        benefits=[
            "Streamlined processes",
            "90% less data entry",
            "Real-time insights",
            "Better accuracy",
            "Enhanced productivity",
        ],
        case_study=CaseStudy(
            title="Digital Transformation",
            description="A manufacturing business modernising its accounting.",
            result="Month-end close reduced from 10 days to 2 with improved accuracy.",
        ),
        faqs=[
            FAQ(
                question="Which software is best?",
                answer="We assess your needs before recommending Xero, FreeAgent or QuickBooks.",
            ),
            FAQ(
                question="How long does implementation take?",
                answer="Typically 2 to 4 weeks including setup, migration and training.",
            ),
        ],
    ),
    Service(
        id="statutory-accounts",
        slug="statutory-accounts",
        title="Statutory Accounts",
        description="Companies House filing with iXBRL tagging and year-end compliance.",
        meta_title="Statutory Accounts & Companies House Filing | MA & CO",
        meta_description="Professional statutory accounts, Companies House filing and iXBRL tagging.",
        category=ServiceCategory.compliance,
        icon="FileText",
        features=[
            "Annual accounts",
            "Companies House filing",
            "Corporation Tax returns",
            "iXBRL tagging",
            "Micro-entity accounts",
            "Dormant company accounts",
            "Group accounts",
            "Audit coordination",
        ],
        benefits=[
            "Meet every deadline",
            "Avoid late filing penalties",
            "iXBRL compliance",
            "Accurate computations",
            "Audit support",
        ],
        case_study=CaseStudy(
            title="Group Structure",
            description="A property group with multiple subsidiaries.",
            result="Consolidated accounts delivered with £25,000 of tax savings through planning.",
        ),
        faqs=[
            FAQ(
                question="What are the filing deadlines?",
                answer="9 months after the year end for Companies House and 12 months for the CT600 return.",
            ),
            FAQ(
                question="What is iXBRL?",
                answer="A machine-readable format required for UK company accounts and tax computations.",
            ),
        ],
    ),
    # --- Management & advisory ---
    Service(
        id="budgeting-forecasting",
        slug="budgeting-forecasting",
        title="Budgeting & Forecasting",
        description="Strategic planning with rolling forecasts and cash flow modelling.",
        meta_title="Business Budgeting & Financial Forecasting | MA & CO",
        meta_description="Professional budgeting, forecasting and cash flow modelling for strategic planning.",
        category=ServiceCategory.management,
        icon="TrendingUp",
        features=[
            "Annual budgets",
            "Rolling forecasts",
            "Cash flow modelling",
            "Scenario planning",
            "Variance reporting",
            "KPI tracking",
            "Investment appraisal",
            "Strategic support",
        ],
        benefits=[
            "Financial control",
            "Cash flow management",
            "Data-driven decisions",
            "Investor confidence",
            "Proactive planning",
        ],
        case_study=CaseStudy(
            title="SaaS Scaling",
            description="A growing software company needed forecasts for fundraising.",
            result="Enabled a successful £2M Series A with a 3-year financial model.",
        ),
        faqs=[
            FAQ(
                question="How often should forecasts be updated?",
                answer="Monthly rolling forecasts suit most growing businesses.",
            ),
            FAQ(
                question="What is scenario planning?",
                answer="Modelling best, worst and likely cases so decisions are made with the range in view.",
            ),
        ],
    ),
    Service(
        id="management-accounts",
        slug="management-accounts",
        title="Management Accounts",
        description="Monthly reporting with KPI dashboards and board-level insights.",
        meta_title="Management Accounts & KPI Reporting | MA & CO",
        meta_description="Professional management accounts, KPI dashboards and board reporting.",
        category=ServiceCategory.management,
        icon="BarChart3",
        features=[
            "Monthly accounts",
            "Board packs",
            "KPI dashboards",
            "P&L analysis",
            "Balance sheet review",
            "Cash flow analysis",
            "Profitability reporting",
            "Benchmarking",
        ],
        benefits=[
            "Timely insights",
            "Early trend identification",
            "Operational efficiency",
            "Better governance",
            "Clear stakeholder communication",
        ],
        case_study=CaseStudy(
            title="Restaurant Turnaround",
            description="A restaurant chain with profitability issues.",
            result="Profitability improved by 25% within 6 months.",
        ),
        faqs=[
            FAQ(question="When are accounts delivered?", answer="5 to 7 working days after month end."),
            FAQ(
                question="Which KPIs do you recommend?",
                answer="Revenue growth, gross margin, cash conversion and customer acquisition cost.",
            ),
        ],
    ),
    # --- Tax strategy ---
    Service(
        id="personal-tax",
        slug="personal-tax",
        title="Personal Tax",
        description="Self Assessment and personal tax optimisation with reliefs.",
        meta_title="Personal Tax & Self Assessment | MA & CO Croydon",
        meta_description="Expert personal tax services, Self Assessment, allowances and reliefs.",
        category=ServiceCategory.tax,
        icon="User",
        features=[
            "Self Assessment returns",
            "Personal allowances",
            "Employment expenses",
            "Capital allowances",
            "Marriage allowance",
            "SEIS/EIS reliefs",
            "Pension planning",
            "Rental income",
        ],
        benefits=[
            "Maximise reliefs",
            "Accurate filing",
            "Minimise liability",
            "HMRC correspondence handled",
            "Strategic planning",
        ],
        case_study=CaseStudy(
            title="Executive Optimisation",
            description="A senior executive with multiple income sources.",
            result="£15,000 annual tax reduction through restructuring.",
        ),
        faqs=[
            FAQ(
                question="Do I need to file a Self Assessment return?",
                answer="Usually yes if you are self-employed, have rental income, or have income HMRC cannot tax at source.",
            ),
            FAQ(
                question="What is the marriage allowance?",
                answer="You can transfer £1,260 of personal allowance to your spouse, saving up to £252 a year.",
            ),
        ],
    ),
    Service(
        id="business-tax",
        slug="business-tax",
        title="Business Tax",
        description="R&D tax credits, AIA planning, and business tax optimisation.",
        meta_title="Business Tax Planning & R&D Credits | MA & CO",
        meta_description="Expert business tax services, R&D credits, AIA planning and creative reliefs.",
        category=ServiceCategory.tax,
        icon="Building",
        features=[
            "Tax planning",
            "R&D tax credits",
            "AIA planning",
            "Creative industry reliefs",
            "Capital allowances",
            "Loss relief",
            "Transfer pricing",
            "International tax",
        ],
        benefits=[
            "Maximise reliefs",
            "Reduce effective tax rates",
            "Improve cash flow",
            "Ensure compliance",
            "Strategic planning",
        ],
        case_study=CaseStudy(
            title="Tech R&D Success",
            description="A software company unaware of its R&D opportunities.",
            result="£54,000 in tax credits from £180,000 of qualifying activity.",
        ),
        faqs=[
            FAQ(
                question="What qualifies for R&D relief?",
                answer="Projects seeking an advance in science or technology by resolving uncertainty.",
            ),
            FAQ(
                question="What is the Annual Investment Allowance?",
                answer="100% tax relief on qualifying plant and machinery up to £1 million a year.",
            ),
        ],
    ),
    Service(
        id="corporation-tax",
        slug="corporation-tax",
        title="Corporation Tax",
        description="CT600 filing and dividend vs salary optimisation.",
        meta_title="Corporation Tax Planning & CT600 Filing | MA & CO",
        meta_description="Professional corporation tax services, CT600 filing and dividend optimisation.",
        category=ServiceCategory.tax,
        icon="TrendingUp",
        features=[
            "CT600 returns",
            "Tax planning",
            "Dividend optimisation",
            "Group relief",
            "CFC rules",
            "Restructuring",
            "Substantial shareholding exemption",
            "Quarterly instalment payments",
        ],
        benefits=[
            "Minimise tax liability",
            "Optimise remuneration",
            "Ensure compliance",
            "Strategic structuring",
            "HMRC liaison",
        ],
        case_study=CaseStudy(
            title="Corporate Restructure",
            description="A business restructuring across multiple companies.",
            result="Effective tax rate reduced by 15% with simplified compliance.",
        ),
        faqs=[
            FAQ(
                question="When is Corporation Tax due?",
                answer="9 months and 1 day after the end of the accounting period for most companies.",
            ),
            FAQ(
                question="Should I take salary or dividends?",
                answer="We model both scenarios to find the most tax-efficient mix for your circumstances.",
            ),
        ],
    ),
    Service(
        id="capital-gains-tax",
        slug="capital-gains-tax",
        title="Capital Gains Tax",
        description="CGT planning for property and business disposals with BADR.",
        meta_title="Capital Gains Tax Planning & BADR | MA & CO",
        meta_description="Expert CGT advice, property disposals and Business Asset Disposal Relief.",
        category=ServiceCategory.tax,
        icon="TrendingUp",
        features=[
            "CGT calculations",
            "Business Asset Disposal Relief",
            "Property planning",
            "Share disposals",
            "Private residence relief",
            "Rollover relief",
            "Portfolio planning",
            "Timing optimisation",
        ],
        benefits=[
            "Minimise CGT",
            "Maximise reliefs",
            "Strategic timing",
            "Portfolio efficiency",
            "Valuation support",
        ],
        case_study=CaseStudy(
            title="Business Sale",
            description="A business owner planning the sale of their company.",
            result="£250,000 CGT saving through BADR structuring.",
        ),
        faqs=[
            FAQ(
                question="What is Business Asset Disposal Relief?",
                answer="A reduced CGT rate on qualifying business disposals up to a £1M lifetime limit.",
            ),
            FAQ(
                question="Can CGT be deferred?",
                answer="Rollover relief and EIS investments can defer gains in the right circumstances.",
            ),
        ],
    ),
    Service(
        id="inheritance-tax",
        slug="inheritance-tax-estate-planning",
        title="Inheritance Tax",
        description="Estate planning with trusts and succession strategies.",
        meta_title="Inheritance Tax Planning & Estate Planning | MA & CO",
        meta_description="Expert inheritance tax planning, trusts and succession planning.",
        category=ServiceCategory.tax,
        icon="Shield",
        features=[
            "IHT planning",
            "Trust establishment",
            "Lifetime gifts",
            "Family investment companies",
            "Succession planning",
            "Will trusts",
            "Business and agricultural property relief",
            "Gifting programmes",
        ],
        benefits=[
            "Minimise IHT",
            "Preserve family wealth",
            "Structured succession",
            "Tax-efficient transfers",
            "Trust administration",
        ],
        case_study=CaseStudy(
            title="Multi-Generational Planning",
            description="A family business with a £5M estate needing a succession plan.",
            result="£1.6M projected IHT saving while the family kept control.",
        ),
        faqs=[
            FAQ(
                question="What is the IHT threshold?",
                answer="£325,000, plus a £175,000 residence nil-rate band when a home passes to direct descendants.",
            ),
            FAQ(
                question="What is a family investment company?",
                answer="A company holding investments so that growth accrues to the younger generation.",
            ),
        ],
    ),
    # --- Specialist ---
    Service(
        id="independent-examiner",
        slug="independent-examiner",
        title="Independent Examiner",
        description="Independent examination for charities and societies.",
        meta_title="Independent Examiner Services | Charity Accounts | MA & CO",
        meta_description="Professional independent examination for charities and societies.",
        category=ServiceCategory.specialist,
        icon="Shield",
        features=[
            "Charity examinations",
            "Society accounts",
            "Charities Act compliance",
            "SORP application",
            "Trustee training",
            "Charity Commission liaison",
            "Grant compliance",
            "Risk assessment",
        ],
        benefits=[
            "Regulatory compliance",
            "Sector expertise",
            "Trustee confidence",
            "Stakeholder assurance",
            "Risk mitigation",
        ],
        case_study=CaseStudy(
            title="Educational Charity",
            description="A growing charity needing compliance guidance.",
            result="Comprehensive examination with improved controls and a compliance framework.",
        ),
        faqs=[
            FAQ(
                question="What is an independent examination?",
                answer="A lighter review than an audit, available to charities with income between £25k and £1M.",
            ),
            FAQ(
                question="What is SORP?",
                answer="The Statement of Recommended Practice that governs how charities prepare their accounts.",
            ),
        ],
    ),
    Service(
        id="forensic-accounting",
        slug="forensic-accounting",
        title="Forensic Accounting",
        description="Fraud investigations and litigation support services.",
        meta_title="Forensic Accounting & Fraud Investigation | MA & CO",
        meta_description="Professional forensic accounting, fraud investigations and litigation support.",
        category=ServiceCategory.specialist,
        icon="Search",
        features=[
            "Fraud investigations",
            "Litigation support",
            "Dispute resolution",
            "Asset tracing",
            "Expert witness",
            "Financial analysis",
            "Compliance reviews",
            "Risk assessment",
        ],
        benefits=[
            "Professional investigation",
            "Court-ready reports",
            "Expert testimony",
            "Risk identification",
            "Recovery assistance",
        ],
        case_study=CaseStudy(
            title="Commercial Dispute",
            description="A partnership dispute requiring financial investigation.",
            result="Uncovered a £200,000 discrepancy leading to a successful resolution.",
        ),
        faqs=[
            FAQ(
                question="When do I need forensic accounting?",
                answer="Suspected fraud, shareholder disputes, litigation or due diligence.",
            ),
            FAQ(
                question="Do you provide expert witness services?",
                answer="Yes, including court testimony and independent opinions on financial matters.",
            ),
        ],
    ),
    Service(
        id="internal-audit",
        slug="internal-audit",
        title="Internal Audit",
        description="Risk management and internal controls review.",
        meta_title="Internal Audit & Risk Management | MA & CO Accountants",
        meta_description="Professional internal audit services, risk management and compliance reviews.",
        category=ServiceCategory.specialist,
        icon="Shield",
        features=[
            "Risk assessment",
            "Internal controls",
            "Compliance reviews",
            "Process improvement",
            "Audit planning",
            "Control testing",
            "Reporting",
            "Follow-up reviews",
        ],
        benefits=[
            "Risk mitigation",
            "Improved controls",
            "Compliance assurance",
            "Process efficiency",
            "Stakeholder confidence",
        ],
        case_study=CaseStudy(
            title="Growing Business",
            description="A scaling company needing robust internal controls.",
            result="A control framework that reduced operational risk by 60%.",
        ),
        faqs=[
            FAQ(
                question="What is internal audit for?",
                answer="An independent assessment of risk management and internal controls.",
            ),
            FAQ(
                question="How often should audits run?",
                answer="Annually or twice a year depending on your risk profile.",
            ),
        ],
    ),
    Service(
        id="company-secretarial",
        slug="company-secretarial",
        title="Company Secretarial",
        description="Companies House compliance and company secretarial services.",
        meta_title="Company Secretarial Services | MA & CO Accountants",
        meta_description="Professional company secretarial services and Companies House compliance.",
        category=ServiceCategory.specialist,
        icon="Building",
        features=[
            "Confirmation statements",
            "PSC registers",
            "Share transfers",
            "Director appointments",
            "Registered office",
            "Statutory books",
            "TCSP compliance",
            "Annual reviews",
        ],
        benefits=[
            "Full compliance",
            "Statutory obligations met",
            "Good corporate governance",
            "Administrative efficiency",
            "Professional service",
        ],
        case_study=CaseStudy(
            title="Multi-Company Group",
            description="A group with a complex shareholding structure.",
            result="Streamlined compliance across 12 companies with automated processes.",
        ),
        faqs=[
            FAQ(
                question="What is a confirmation statement?",
                answer="An annual filing confirming company details held at Companies House.",
            ),
            FAQ(
                question="What is a PSC register?",
                answer="A record of the people with significant control over the company.",
            ),
        ],
    ),
]
