from flask import current_app

from cyberlearn_app.core.extensions import db
from cyberlearn_app.models import Lesson, Question


STARTER_LESSONS = [
    {
        "title": "CIA Triad - The Foundation of Cybersecurity",
        "content": (
            "The CIA Triad is a fundamental model for security, focusing on three key principles: "
            "Confidentiality, Integrity, and Availability. Think of it as the bedrock of data and system "
            "protection. Confidentiality ensures that sensitive information is only accessible to authorized "
            "individuals. Integrity maintains the accuracy and trustworthiness of data throughout its lifecycle. "
            "Availability guarantees that information and resources are accessible when needed by authorized users."
        ),
    },
    {
        "title": "Non-Repudiation - Ensuring Accountability",
        "content": (
            "Non-Repudiation is about ensuring a party cannot deny an action they have committed. It provides "
            "undeniable proof of the origin of a digital transaction or communication, often using digital "
            "signatures. This principle is crucial in digital contracts, email communications, and financial "
            "transactions where proof of participation is essential for legal and business purposes."
        ),
    },
]

STARTER_QUESTIONS = [
    {
        "question": "What is the primary goal of Confidentiality in the CIA Triad?",
        "options": ["To prevent unauthorized access to information.", "To ensure data is accurate and trustworthy.", "To guarantee system uptime and availability.", "To track user actions."],
        "correct": 0,
    },
    {
        "question": "Which of the following is an example of a tool used to ensure Confidentiality?",
        "options": ["Firewalls.", "Data encryption.", "System backups.", "Digital signatures."],
        "correct": 1,
    },
    {
        "question": "A hacker changing a record in a database is a violation of which principle of the CIA Triad?",
        "options": ["Confidentiality.", "Integrity.", "Availability.", "Non-Repudiation."],
        "correct": 1,
    },
    {
        "question": "What does 'Integrity' refer to in the context of cybersecurity?",
        "options": ["Keeping data secret.", "Ensuring data has not been modified.", "Making sure data is accessible.", "Proving the origin of a message."],
        "correct": 1,
    },
    {
        "question": "A Distributed Denial of Service (DDoS) attack primarily targets which aspect of the CIA Triad?",
        "options": ["Confidentiality.", "Integrity.", "Availability.", "Non-Repudiation."],
        "correct": 2,
    },
    {
        "question": "What is the main purpose of Availability?",
        "options": ["Ensuring data is not leaked.", "Verifying data is accurate.", "Guaranteeing that authorized users can access resources.", "Preventing a user from denying a sent message."],
        "correct": 2,
    },
    {
        "question": "Backing up data and having a disaster recovery plan are measures to protect which principle?",
        "options": ["Confidentiality.", "Integrity.", "Availability.", "All of the above."],
        "correct": 2,
    },
    {
        "question": "Which of the following is NOT a component of the CIA Triad?",
        "options": ["Confidentiality.", "Integrity.", "Authentication.", "Availability."],
        "correct": 2,
    },
    {
        "question": "In the CIA Triad, which principle is concerned with ensuring that data is only accessible to those with a need to know?",
        "options": ["Integrity.", "Availability.", "Confidentiality.", "Both A and C."],
        "correct": 2,
    },
    {
        "question": "What is the primary method for maintaining data Integrity?",
        "options": ["Using strong passwords.", "Implementing file hashing and checksums.", "Encrypting network traffic.", "Setting up a firewall."],
        "correct": 1,
    },
    {
        "question": "What is the definition of Non-Repudiation?",
        "options": ["The principle of keeping data secret.", "The ability to prove a party's involvement in a digital transaction or communication.", "The process of confirming a user's identity.", "The principle of ensuring data is correct and unaltered."],
        "correct": 1,
    },
    {
        "question": "Which technology is commonly used to achieve Non-Repudiation?",
        "options": ["Firewalls.", "Antivirus software.", "Digital signatures.", "System backups."],
        "correct": 2,
    },
    {
        "question": "When a user denies sending an email, which cybersecurity principle is being challenged?",
        "options": ["Confidentiality.", "Integrity.", "Non-Repudiation.", "Availability."],
        "correct": 2,
    },
    {
        "question": "A signed contract that cannot be denied by the sender is an example of what?",
        "options": ["Confidentiality.", "Integrity.", "Non-Repudiation.", "Availability."],
        "correct": 2,
    },
    {
        "question": "Which component of an email helps ensure Non-Repudiation?",
        "options": ["The subject line.", "The sender's IP address.", "A digital signature or certificate.", "The message body."],
        "correct": 2,
    },
    {
        "question": "Non-Repudiation is most closely related to which other cybersecurity concept?",
        "options": ["Authentication.", "Authorization.", "Accountability.", "Confidentiality."],
        "correct": 2,
    },
    {
        "question": "If a person signs a digital document, and their signature can be cryptographically verified, which principle is being applied?",
        "options": ["Availability.", "Integrity.", "Non-Repudiation.", "All of the above."],
        "correct": 2,
    },
    {
        "question": "Which of the following is a primary threat to Non-Repudiation?",
        "options": ["Data loss.", "System downtime.", "Stolen private keys used for a digital signature.", "Unauthorized viewing of data."],
        "correct": 2,
    },
    {
        "question": "What is the difference between Authentication and Non-Repudiation?",
        "options": ["Authentication proves who you are; Non-Repudiation proves you did something.", "Authentication proves you did something; Non-Repudiation proves who you are.", "Authentication proves data is accurate; Non-Repudiation proves data is secure.", "There is no difference."],
        "correct": 0,
    },
    {
        "question": "Which cryptographic tool is essential for both Integrity and Non-Repudiation?",
        "options": ["Symmetric encryption.", "Asymmetric (public key) cryptography.", "Hashing algorithms.", "Both B and C."],
        "correct": 3,
    },
    {
        "question": "What is the 'C' in the CIA Triad?",
        "options": ["Control.", "Confidentiality.", "Cyber-space.", "Connectivity."],
        "correct": 1,
    },
    {
        "question": "What is the 'I' in the CIA Triad?",
        "options": ["Identity.", "Information.", "Integrity.", "Internet."],
        "correct": 2,
    },
    {
        "question": "What is the 'A' in the CIA Triad?",
        "options": ["Access.", "Assurance.", "Availability.", "Authentication."],
        "correct": 2,
    },
    {
        "question": "A strong password policy is a control primarily for which principle?",
        "options": ["Confidentiality.", "Integrity.", "Availability.", "Non-Repudiation."],
        "correct": 0,
    },
    {
        "question": "Which security measure ensures that a file, once written, cannot be altered without detection?",
        "options": ["Access control lists.", "File encryption.", "Hashing.", "Backups."],
        "correct": 2,
    },
    {
        "question": "A company's website goes offline due to a power outage. This is a failure of which principle?",
        "options": ["Confidentiality.", "Integrity.", "Availability.", "Non-Repudiation."],
        "correct": 2,
    },
    {
        "question": "Which of the following is the best example of a Non-Repudiation measure?",
        "options": ["Usernames and passwords.", "A log file showing who accessed a specific file and when.", "A firewall rule blocking a certain port.", "Encrypting an email."],
        "correct": 1,
    },
    {
        "question": "A man-in-the-middle attack that intercepts and alters data in transit is a threat to which principle?",
        "options": ["Confidentiality.", "Integrity.", "Availability.", "Both A and B."],
        "correct": 3,
    },
    {
        "question": "Which of the following is a key element of Non-Repudiation?",
        "options": ["Secrecy.", "Undeniable proof.", "Speed.", "Accessibility."],
        "correct": 1,
    },
    {
        "question": "When an email sender uses a digital signature, the recipient can verify what two things?",
        "options": ["Confidentiality and Availability.", "Integrity and Non-Repudiation.", "Access and Control.", "Authentication and Authorization."],
        "correct": 1,
    },
]


def seed_content():
    """Khởi tạo bài học và câu hỏi mẫu khi bảng còn trống."""
    if Lesson.query.count() == 0:
        for lesson_data in STARTER_LESSONS:
            db.session.add(Lesson(**lesson_data))
        db.session.commit()
        current_app.logger.info("Seeded %d lessons", len(STARTER_LESSONS))

    if Question.query.count() == 0:
        for question_data in STARTER_QUESTIONS:
            db.session.add(Question(**question_data))
        db.session.commit()
        current_app.logger.info("Seeded %d questions", len(STARTER_QUESTIONS))
