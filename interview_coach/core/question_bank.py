"""
Question Bank Builder for Interview Coach

Assembles templated technical and behavioral practice questions from a
candidate profile. Deterministic: the same profile always yields the same
bank.
"""

import logging

from interview_coach.models.profile import Profile
from interview_coach.models.question import Question, QuestionBank, QuestionCategory

logger = logging.getLogger(__name__)


SECOND_SKILL_FALLBACK = "frameworks related to your field"


def build_technical_questions(profile: Profile) -> list[Question]:
    """Technical questions built around the profile's skills and title."""
    skill = profile.primary_skill
    second_skill = profile.secondary_skill or SECOND_SKILL_FALLBACK
    title = profile.job_title

    templates = [
        (
            f"Can you explain how you've used {skill} in your previous projects?",
            f"When discussing my experience with {skill}, I emphasize specific projects "
            f"where I applied this skill to solve real problems. For example, in my most "
            f"recent role, I used {skill} to develop a solution that improved process "
            f"efficiency by 30%. I focus on explaining my technical approach, the "
            f"challenges I faced, and the measurable outcomes achieved.",
            "Be specific about your technical contributions and quantify the impact of "
            "your work whenever possible. Use the STAR method (Situation, Task, Action, "
            "Result) to structure your response.",
        ),
        (
            f"What's your approach to learning new technologies like {second_skill}?",
            "My approach to learning new technologies involves a combination of "
            "structured learning and practical application. I typically start with "
            "documentation and tutorials to understand the fundamentals, then reinforce "
            "my learning by building small projects. I also participate in online "
            "communities and collaborate with peers to gain different perspectives and "
            "solve problems collaboratively.",
            "Emphasize your self-motivation and systematic approach to acquiring new "
            "skills. Provide examples of technologies you've recently learned and how "
            "you applied them in real situations.",
        ),
        (
            f"Describe a challenging technical problem you've solved in your previous "
            f"roles as a {title}.",
            "When faced with challenging technical problems, I follow a systematic "
            "troubleshooting approach. In a recent project, we encountered [specific "
            "problem]. I first gathered all available information, broke down the issue "
            "into smaller components, and prioritized the most critical aspects. After "
            "identifying the root cause through [specific methods], I implemented "
            "[specific solution] which resulted in [specific outcome].",
            "Choose an example that showcases your technical depth and problem-solving "
            "methodology. Explain your thought process and decision-making rationale "
            "clearly.",
        ),
        (
            f"How do you ensure code quality and best practices in your {title} role?",
            "I ensure code quality through a multi-faceted approach that includes "
            "following established coding standards, implementing automated testing with "
            "high coverage, conducting regular code reviews, and using static analysis "
            "tools. I believe in the importance of documenting code for future "
            "maintainability and practicing continuous refactoring to improve design "
            "patterns and eliminate technical debt.",
            "Mention specific tools or methodologies you've used for quality assurance. "
            "Discuss how you balance quality with delivery timelines and how you address "
            "technical debt.",
        ),
        (
            f"What metrics do you use to evaluate the success of your work as a {title}?",
            f"As a {title}, I evaluate success using both technical and business "
            f"metrics. Technical metrics include code quality measurements like test "
            f"coverage, bug rates, and system performance indicators. Business metrics "
            f"focus on user adoption, customer satisfaction, and how my technical "
            f"solutions impact key business KPIs. I believe the most successful technical "
            f"work directly contributes to business objectives while maintaining high "
            f"technical standards.",
            "Connect technical achievements to business outcomes. Show that you "
            "understand the bigger picture and how your role contributes to "
            "organizational goals.",
        ),
    ]

    return [
        Question(
            id=index,
            category=QuestionCategory.TECHNICAL,
            prompt=prompt,
            ideal_answer=answer,
            tip=tip,
        )
        for index, (prompt, answer, tip) in enumerate(templates, start=1)
    ]


BEHAVIORAL_TEMPLATES: list[tuple[str, str, str]] = [
    (
        "Tell me about a time when you had to work under a tight deadline. How did you "
        "manage it?",
        "When faced with tight deadlines, I prioritize work strategically and maintain "
        "clear communication. For example, in my previous role, we had an unexpected "
        "client request that needed to be completed within half the normal timeframe. I "
        "immediately assessed what was needed, broke down the work into manageable "
        "components, and collaborated with team members to distribute tasks based on "
        "individual strengths. I set up daily quick check-ins to monitor progress and "
        "address blockers. Through effective prioritization and team coordination, we "
        "delivered the project on time without compromising quality.",
        "Emphasize your time management skills, ability to prioritize, and communication "
        "strategy. Provide a specific example with a clear beginning, middle, and "
        "successful conclusion.",
    ),
    (
        "How do you handle conflicts within a team?",
        "I approach conflicts with a focus on open communication and finding common "
        "ground. In one instance, there was disagreement in my team about the technical "
        "approach for a project. I organized a meeting where each person could express "
        "their perspective without interruption. Then, I guided the discussion toward "
        "identifying the strengths in each approach and the underlying concerns. By "
        "focusing on our shared goals and evaluating options objectively against project "
        "requirements, we developed a hybrid solution that incorporated the best "
        "elements from different perspectives and ultimately led to a successful project "
        "outcome.",
        "Show that you view conflict as an opportunity for growth and better solutions. "
        "Demonstrate active listening skills and an ability to find win-win resolutions.",
    ),
    (
        "Describe a situation where you had to adapt to a significant change at work.",
        "Adaptability is essential in today's fast-paced work environment. When our "
        "company underwent a major reorganization last year, my role and reporting "
        "structure changed significantly. I embraced this change by first taking time to "
        "understand the new objectives and expectations. I scheduled meetings with new "
        "stakeholders to build relationships and gain clarity on priorities. I also "
        "identified skills gaps for my new responsibilities and created a personal "
        "development plan to address them. By maintaining a positive attitude and "
        "focusing on the opportunities rather than the challenges, I was able to "
        "transition smoothly and contribute effectively in the new structure within two "
        "months.",
        "Show resilience and a positive attitude toward change. Highlight your proactive "
        "approach to understanding and navigating new situations.",
    ),
    (
        "What's your approach to managing multiple competing priorities?",
        "Managing competing priorities requires systematic organization and regular "
        "reassessment. I maintain a prioritization system based on urgency, importance, "
        "and strategic value. Each morning, I review and adjust my priorities based on "
        "any new developments. I communicate proactively with stakeholders about "
        "timelines and potential constraints. When truly overloaded, I work with my "
        "manager to realign expectations or resources. This approach helped me "
        "successfully juggle three major projects simultaneously in my last role, all of "
        "which were delivered on time and met their objectives.",
        "Demonstrate your organizational skills and ability to make difficult decisions "
        "about what takes precedence. Mention tools or systems you use to stay "
        "organized.",
    ),
    (
        "Where do you see yourself professionally in five years?",
        "In five years, I aim to have deepened my expertise in [specific area related to "
        "job] while developing broader leadership capabilities. I'm particularly "
        "interested in growing toward [specific relevant role or responsibility] where I "
        "can combine technical excellence with strategic thinking. I'm committed to "
        "continuous learning, and over the next few years, I plan to develop skills in "
        "[relevant emerging area] which I believe will be increasingly important in this "
        "industry. Ultimately, I want to be in a position where I can make significant "
        "contributions to challenging projects while helping to mentor and develop "
        "others in the team.",
        "Show ambition that's aligned with the potential career path at the company. "
        "Balance technical growth with leadership development, and demonstrate that "
        "you've given thoughtful consideration to your career trajectory.",
    ),
]


def build_behavioral_questions() -> list[Question]:
    """Behavioral questions; these do not depend on the profile."""
    return [
        Question(
            id=index,
            category=QuestionCategory.BEHAVIORAL,
            prompt=prompt,
            ideal_answer=answer,
            tip=tip,
        )
        for index, (prompt, answer, tip) in enumerate(BEHAVIORAL_TEMPLATES, start=1)
    ]


def build_question_bank(profile: Profile) -> QuestionBank:
    """
    Build the practice question bank for a profile.

    Args:
        profile: Extracted candidate profile

    Returns:
        QuestionBank with 5 technical and 5 behavioral questions
    """
    bank = QuestionBank(
        technical=build_technical_questions(profile),
        behavioral=build_behavioral_questions(),
    )
    logger.info(
        f"Built question bank for {profile.job_title}: "
        f"{len(bank.technical)} technical, {len(bank.behavioral)} behavioral"
    )
    return bank
