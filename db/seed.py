"""
Sample marketplace data: ten enterprise SaaS startups with review sets.
"""

import logging
import random
from typing import Optional

from sqlalchemy.orm import Session

from db.models import Startup
from db.repository import create_startup, add_review

logger = logging.getLogger(__name__)


SAMPLE_STARTUPS = [
    {
        "name": "DataSift AI",
        "tagline": "Real-time enterprise data intelligence for Fortune 500 teams",
        "industry": "Data & Analytics",
        "stage": "Series B",
        "description": "Real-time data pipeline orchestration and AI-powered analytics for enterprise teams.",
        "upvotes": 18,
    },
    {
        "name": "SecureVault Pro",
        "tagline": "Zero-trust security infrastructure for cloud-native enterprises",
        "industry": "CyberSecurity",
        "stage": "Series C",
        "description": "Zero-trust network architecture, threat detection and compliance automation.",
        "upvotes": 24,
    },
    {
        "name": "FlowHR",
        "tagline": "AI-powered HR automation platform for scaling teams",
        "industry": "HR Tech",
        "stage": "Series A",
        "description": "Automates onboarding, performance reviews, payroll compliance and workforce analytics.",
        "upvotes": 9,
        "early_access": True,
        "deal_text": "40% off annual plan for first 50 enterprise customers",
    },
    {
        "name": "LogiChain",
        "tagline": "Blockchain-powered supply chain transparency for global enterprises",
        "industry": "Supply Chain",
        "stage": "Series B",
        "description": "End-to-end supply chain visibility on a distributed ledger, integrated with 40+ ERPs.",
        "upvotes": 14,
    },
    {
        "name": "MedSync AI",
        "tagline": "Clinical intelligence platform for hospitals and health networks",
        "industry": "HealthTech",
        "stage": "Series C",
        "description": "Real-time clinical data processing for diagnosis support and resource allocation.",
        "upvotes": 31,
    },
    {
        "name": "RevenueOS",
        "tagline": "Unified revenue operations platform for B2B SaaS companies",
        "industry": "FinTech",
        "stage": "Series A",
        "description": "CRM, billing, forecasting and commission management in one revenue layer.",
        "upvotes": 7,
        "early_access": True,
        "deal_text": "Free implementation + 3 months free for Series A companies",
    },
    {
        "name": "CloudOps360",
        "tagline": "Intelligent cloud cost optimization and DevOps automation",
        "industry": "DevOps",
        "stage": "Series B",
        "description": "Predicts cloud spend, auto-scales infrastructure and enforces security policies.",
        "upvotes": 19,
    },
    {
        "name": "LegalMind",
        "tagline": "AI contract analysis and legal risk intelligence for enterprises",
        "industry": "LegalTech",
        "stage": "Series A",
        "description": "Contract review with fine-tuned language models and automatic risk-clause flagging.",
        "upvotes": 11,
        "early_access": True,
        "deal_text": "60-day free trial + dedicated legal AI specialist",
    },
    {
        "name": "EduScale",
        "tagline": "Enterprise learning management powered by adaptive AI",
        "industry": "EdTech",
        "stage": "Series D",
        "description": "Personalized learning paths for enterprise workforces across 40 countries.",
        "upvotes": 38,
    },
    {
        "name": "PropelCX",
        "tagline": "AI customer experience platform built for enterprise scale",
        "industry": "CX & Support",
        "stage": "Series B",
        "description": "AI chat, sentiment analysis and omnichannel routing for enterprise support.",
        "upvotes": 16,
    },
]

# (roi, scalability, security, comment); integration is drawn at seed time
SAMPLE_REVIEWS = [
    [(5, 5, 4, "Transformed our data operations. ROI was visible in 60 days."),
     (4, 5, 5, "Best in class scalability. Handles our peak loads without issues."),
     (5, 4, 4, "Strong product. Integration with our stack was smooth.")],
    [(4, 4, 5, "Zero-trust implementation is the best we've evaluated."),
     (5, 5, 5, "Passed our enterprise security audit with flying colors."),
     (4, 5, 5, "Compliance automation alone saves us 20hrs/week.")],
    [(4, 3, 4, "Great onboarding automation. Still maturing on scalability."),
     (3, 4, 4, "Promising product. Support team is very responsive.")],
    [(4, 4, 4, "SAP integration worked first try. Visibility is excellent."),
     (5, 4, 3, "Massive ROI on supply chain visibility. Security could improve."),
     (4, 5, 4, "Handles our global logistics complexity well.")],
    [(5, 5, 5, "FDA cleared and the clinical AI is genuinely impressive."),
     (5, 5, 5, "Reduced readmissions by 18% in first quarter. Remarkable."),
     (4, 5, 5, "HIPAA compliance was seamless. Strong integration layer."),
     (5, 4, 5, "Best clinical intelligence platform we've piloted.")],
    [(4, 3, 3, "Great concept, still building out enterprise features.")],
    [(5, 5, 4, "42% cost reduction claim is real. We hit 38% in 3 months."),
     (5, 5, 4, "Auto-scaling policies have been rock solid."),
     (4, 4, 5, "Security policy enforcement is excellent.")],
    [(5, 4, 4, "80% faster contract review is not an exaggeration."),
     (4, 4, 5, "Risk flagging is accurate. Saved us from a bad clause last month.")],
    [(5, 5, 5, "500k users and zero performance issues. Exceptional scale."),
     (5, 5, 4, "Adaptive learning paths have improved retention by 40%."),
     (4, 5, 5, "Best enterprise LMS we've deployed globally."),
     (5, 5, 5, "Series D growth is well deserved. Category leader.")],
    [(4, 4, 4, "55% resolution time improvement is accurate in our case."),
     (5, 4, 4, "Omnichannel routing works beautifully. Agents love it."),
     (4, 5, 4, "Scales well during peak support periods.")],
]


def seed_marketplace(db: Session, seed: Optional[int] = 42) -> int:
    """
    Load the sample startups and reviews. Skipped when the marketplace
    already has startups. Returns the number of startups inserted.
    """
    if db.query(Startup.id).first() is not None:
        logger.info("Marketplace already populated — skipping seed.")
        return 0

    rng = random.Random(seed)
    for startup_data, reviews in zip(SAMPLE_STARTUPS, SAMPLE_REVIEWS):
        startup = create_startup(db, **startup_data)
        for roi, scalability, security, comment in reviews:
            add_review(
                db,
                startup.id,
                roi=roi,
                scalability=scalability,
                security=security,
                integration=rng.randint(3, 4),
                comment=comment,
            )
        logger.info(
            f"✅ {startup.name} — {len(reviews)} reviews, {startup.upvotes} upvotes"
        )

    return len(SAMPLE_STARTUPS)
