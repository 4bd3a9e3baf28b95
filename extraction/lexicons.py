"""Read-only vocabularies shared by the extractors.

Every list here is tuned against real French and English resumes; order
matters wherever a list is scanned first-match-wins.
"""

# Uppercase / lowercase letters including the French accented set
UPPER = "A-ZÀÂÄÆÇÉÈÊËÏÎÔÖŒÙÛÜ"
LOWER = "a-zàâäæçéèêëïîôöœùûü"

# ============================================================
# Language detection
# ============================================================
FRENCH_KEYWORDS = (
    'expérience', 'éducation', 'formation', 'compétences', 'competences',
    'langues', 'certifications', 'projets', 'professionnel', 'développeur',
    'ingénieur', 'université', 'école', 'diplôme', 'licence', 'master',
    'stage', 'mission', 'réalisation', 'responsabilités', 'poste',
)

ENGLISH_KEYWORDS = (
    'experience', 'education', 'skills', 'languages', 'certifications',
    'projects', 'professional', 'developer', 'engineer', 'university',
    'school', 'degree', 'bachelor', 'master', 'internship', 'position',
    'responsibilities', 'achievements', 'role',
)

# ============================================================
# Personal info
# ============================================================
POSITION_KEYWORDS = {
    'fr': ('Développeur', 'Ingénieur', 'Architecte', 'Chef', 'Directeur',
           'Consultant', 'Analyste', 'Technicien', 'Responsable', 'Manager'),
    'en': ('Developer', 'Engineer', 'Architect', 'Lead', 'Director',
           'Manager', 'Consultant', 'Analyst', 'Specialist', 'Designer'),
}

# Capitalized words that look like places but are technologies
TECH_TERMS = (
    'Spring', 'Boot', 'React', 'Angular', 'Node', 'Express', 'Django', 'Flask',
    'Laravel', 'Symfony', 'MySQL', 'MongoDB', 'PostgreSQL', 'Redis', 'Docker',
    'Kubernetes', 'AWS', 'Azure', 'GCP', 'JavaScript', 'TypeScript', 'Python',
    'Java', 'PHP', 'Ruby', 'Security', 'Framework', 'Library',
)

KNOWN_CITIES = (
    'Fès', 'Fes', 'Casablanca', 'Rabat', 'Marrakech', 'Tanger', 'Agadir',
    'Mohammedia', 'Oujda', 'Kenitra', 'Tetouan', 'Paris', 'London', 'New York',
    'Dubai', 'Berlin', 'Madrid', 'Rome', 'Amsterdam',
)

# ============================================================
# Education
# ============================================================
DEGREE_KEYWORDS = {
    'fr': ('Ingénieur', 'Master', 'Licence', 'DUT', 'BTS', 'Diplôme',
           'Doctorat', 'Bachelor', 'Technicien'),
    'en': ('Engineer', 'Master', 'Bachelor', 'Degree', 'Diploma', 'PhD',
           'Doctorate', 'Associate', 'Certificate'),
}

INSTITUTION_KEYWORDS = (
    'Université', 'University', 'École', 'School', 'Institut', 'Institute',
    'Faculté', 'Faculty', 'College', 'ISTA',
)

# ============================================================
# Skills
# ============================================================
# Entries are regex fragments; the display name drops the backslashes.
SKILL_LEXICON = (
    # Programming languages
    r'JavaScript', r'TypeScript', r'Python', r'Java', r'C\+\+', r'C#', r'PHP',
    r'Ruby', r'Go', r'Rust', r'Kotlin', r'Swift', r'Scala', r'Dart', r'R',
    r'MATLAB', r'Perl', r'Objective-C',
    # Frontend frameworks and libraries
    r'React', r'Angular', r'Vue\.js', r'Svelte', r'Next\.js', r'Nuxt', r'Gatsby',
    r'Ember', r'Backbone', r'jQuery', r'Redux', r'MobX', r'Vuex',
    # Backend frameworks
    r'Node\.js', r'Express', r'Django', r'Flask', r'FastAPI', r'Spring',
    r'Spring Boot', r'Laravel', r'Symfony', r'ASP\.NET', r'Rails',
    r'Ruby on Rails', r'Gin', r'Echo',
    # Databases and ORMs
    r'MySQL', r'PostgreSQL', r'MongoDB', r'Redis', r'Elasticsearch', r'Firebase',
    r'DynamoDB', r'Oracle', r'SQL Server', r'MariaDB', r'Cassandra', r'Neo4j',
    r'SQLite', r'CouchDB', r'Hibernate', r'Sequelize', r'Mongoose', r'Doctrine',
    r'TypeORM', r'Prisma', r'Knex',
    # Cloud and DevOps
    r'AWS', r'Azure', r'GCP', r'Google Cloud', r'Docker', r'Kubernetes',
    r'Jenkins', r'GitLab CI', r'GitHub Actions', r'CircleCI', r'Travis CI',
    r'Terraform', r'Ansible', r'Chef', r'Puppet', r'Vagrant',
    # Frontend technologies
    r'HTML', r'HTML5', r'CSS', r'CSS3', r'SCSS', r'SASS', r'Less',
    r'Tailwind CSS', r'Bootstrap', r'Material-UI', r'Ant Design', r'Chakra UI',
    r'Styled Components',
    # Mobile
    r'React Native', r'Flutter', r'Ionic', r'Xamarin', r'Swift', r'Kotlin',
    r'Android', r'iOS', r'SwiftUI',
    # APIs and protocols
    r'REST', r'RESTful', r'GraphQL', r'gRPC', r'WebSocket', r'SOAP', r'API',
    # Testing
    r'Jest', r'Mocha', r'Jasmine', r'Cypress', r'Selenium', r'JUnit', r'PyTest',
    r'TestNG', r'Karma', r'Protractor',
    # Version control
    r'Git', r'GitHub', r'GitLab', r'Bitbucket', r'SVN', r'Mercurial',
    # Methodologies and project management
    r'Agile', r'Scrum', r'Kanban', r'Jira', r'Trello', r'Asana', r'Confluence',
    # Other technologies
    r'Microservices', r'Serverless', r'Lambda', r'CI/CD', r'Machine Learning',
    r'Deep Learning', r'TensorFlow', r'PyTorch', r'NLP', r'Data Science',
    r'Big Data', r'Hadoop', r'Spark', r'Kafka',
    # Design
    r'Figma', r'Sketch', r'Adobe XD', r'Photoshop', r'Illustrator', r'InVision',
    # French
    r'Développement', r'Programmation', r'Base de données', r'Gestion de projet',
    r'Méthodologie Agile', r'Intégration continue',
)

TECHNICAL_SKILL_PATTERNS = (
    r'javascript|typescript|python|java|c\+\+|ruby|go|rust|php|swift|kotlin',
    r'react|angular|vue|node|express|django|flask|spring|rails',
    r'sql|mongodb|postgresql|mysql|redis|elasticsearch',
    r'aws|azure|gcp|docker|kubernetes|terraform',
    r'html|css|sass|less|tailwind|bootstrap',
    r'git|linux|unix|bash|shell',
    r'api|rest|graphql|grpc|websocket',
    r'machine learning|deep learning|nlp|ai|data science',
)

SOFT_SKILL_PATTERNS = (
    r'communication|leadership|teamwork|collaboration',
    r'problem.?solving|critical thinking|analytical',
    r'time management|organization|planning',
    r'adaptability|flexibility|creativity',
    r'presentation|public speaking|negotiation',
)

TOOL_SKILL_PATTERNS = (
    r'jira|confluence|trello|asana|notion',
    r'figma|sketch|adobe|photoshop|illustrator',
    r'vs code|intellij|eclipse|vim|emacs',
    r'slack|teams|zoom|discord',
    r'excel|word|powerpoint|google sheets',
)

# ============================================================
# Spoken languages
# ============================================================
LANGUAGE_NAMES = {
    'en': ('English', 'French', 'Spanish', 'German', 'Arabic', 'Chinese',
           'Japanese', 'Portuguese', 'Italian', 'Dutch', 'Russian', 'Korean',
           'Turkish', 'Hindi', 'Urdu', 'Bengali', 'Punjabi', 'Vietnamese',
           'Polish', 'Ukrainian', 'Romanian'),
    'fr': ('Anglais', 'Français', 'Espagnol', 'Allemand', 'Arabe', 'Chinois',
           'Japonais', 'Portugais', 'Italien', 'Néerlandais', 'Russe', 'Coréen',
           'Turc', 'Hindi', 'Ourdou', 'Bengali', 'Pendjabi', 'Vietnamien',
           'Polonais', 'Ukrainien', 'Roumain'),
}

FRENCH_LANGUAGE_MAP = {
    'anglais': 'english',
    'français': 'french',
    'espagnol': 'spanish',
    'allemand': 'german',
    'arabe': 'arabic',
    'chinois': 'chinese',
    'japonais': 'japanese',
    'portugais': 'portuguese',
    'italien': 'italian',
    'néerlandais': 'dutch',
    'russe': 'russian',
    'coréen': 'korean',
    'turc': 'turkish',
    'ourdou': 'urdu',
    'pendjabi': 'punjabi',
    'vietnamien': 'vietnamese',
    'polonais': 'polish',
    'ukrainien': 'ukrainian',
    'roumain': 'romanian',
}

# ============================================================
# Derived metrics
# ============================================================
INDUSTRY_KEYWORDS = {
    'Software Development': ('react', 'angular', 'node', 'python', 'java', 'developer', 'software'),
    'Data Science': ('machine learning', 'data science', 'tensorflow', 'pytorch', 'nlp', 'analytics'),
    'DevOps': ('docker', 'kubernetes', 'aws', 'azure', 'terraform', 'jenkins', 'ci/cd'),
    'Mobile Development': ('react native', 'flutter', 'ios', 'android', 'mobile'),
    'Web Development': ('html', 'css', 'javascript', 'frontend', 'backend', 'full stack'),
    'Cloud Computing': ('aws', 'azure', 'gcp', 'cloud', 'serverless', 'lambda'),
}
