"""Constants used by ansible-style."""
import os.path

DEFAULT_RULESDIR = os.path.join(os.path.dirname(__file__), 'rules')

DEFAULT_CONFIG_FILES = ('.ansible-style', '.config/ansible-style.yml')

# Ordered from most to least important
SEVERITIES = ('VERY_HIGH', 'HIGH', 'MEDIUM', 'LOW', 'VERY_LOW', 'INFO')

YAML_EXTENSIONS = ('.yml', '.yaml')

# UTF-8 byte order mark, allowed before the first line of a file
BOM = '\ufeff'

# Keys of a play that declare it, in any order, before everything else
PLAY_DECLARATION_KEYS = frozenset(['name', 'hosts'])

# Play sections that follow the alphabetically sorted play options
PLAY_SECTION_ORDER = ('pre_tasks', 'roles', 'tasks', 'post_tasks', 'handlers')

PLAY_TASK_LISTS = ('pre_tasks', 'tasks', 'post_tasks', 'handlers')

BLOCK_KEYS = ('block', 'rescue', 'always')

LOOP_KEYS = frozenset(['loop', 'loop_control'])

# Keywords accepted on a task that do not invoke a module
TASK_KEYWORDS = frozenset([
    'action', 'any_errors_fatal', 'args', 'async', 'become', 'become_exe',
    'become_flags', 'become_method', 'become_user', 'changed_when',
    'check_mode', 'collections', 'connection', 'debugger', 'delay',
    'delegate_facts', 'delegate_to', 'diff', 'environment', 'failed_when',
    'ignore_errors', 'ignore_unreachable', 'listen', 'local_action', 'loop',
    'loop_control', 'module_defaults', 'name', 'no_log', 'notify', 'poll',
    'port', 'register', 'remote_user', 'retries', 'run_once', 'tags',
    'throttle', 'timeout', 'until', 'vars', 'when',
    'block', 'rescue', 'always',
    'sudo', 'sudo_user', 'su', 'su_user', 'always_run',
])

# Modules that take their argument as a free-form string
FREE_FORM_MODULES = frozenset([
    'command', 'shell', 'raw', 'script', 'win_command', 'win_shell', 'meta',
    'include', 'include_tasks', 'import_tasks', 'import_playbook',
    'include_vars', 'include_role', 'import_role', 'add_host', 'group_by',
])

# Modules whose argument names another file
INCLUDE_MODULES = frozenset([
    'include', 'include_tasks', 'import_tasks', 'import_playbook',
    'include_vars', 'include_role', 'import_role',
])

# Include modules whose free-form argument is a filename
INCLUDE_FILE_MODULES = frozenset([
    'include', 'include_tasks', 'import_tasks', 'import_playbook',
    'include_vars',
])

SET_FACT_MODULES = frozenset(['set_fact'])

# Short names of modules shipped in ansible.builtin
BUILTIN_MODULES = frozenset([
    'add_host', 'apt', 'apt_key', 'apt_repository', 'assemble', 'assert',
    'async_status', 'blockinfile', 'command', 'copy', 'cron', 'debconf',
    'debug', 'dnf', 'dpkg_selections', 'expect', 'fail', 'fetch', 'file',
    'find', 'gather_facts', 'get_url', 'getent', 'git', 'group', 'group_by',
    'hostname', 'import_playbook', 'import_role', 'import_tasks',
    'include_role', 'include_tasks', 'include_vars', 'iptables',
    'known_hosts', 'lineinfile', 'meta', 'package', 'package_facts', 'pause',
    'ping', 'pip', 'raw', 'reboot', 'replace', 'rpm_key', 'script',
    'service', 'service_facts', 'set_fact', 'set_stats', 'setup', 'shell',
    'slurp', 'stat', 'subversion', 'systemd', 'systemd_service', 'sysvinit',
    'tempfile', 'template', 'unarchive', 'uri', 'user', 'validate_argument_spec',
    'wait_for', 'wait_for_connection', 'yum', 'yum_repository',
])

# Collections whose modules may be referred to by short name elsewhere
BUILTIN_COLLECTIONS = ('ansible.builtin.', 'ansible.legacy.')

# Deprecated keys and what replaces them
DEPRECATED_KEYS = {
    'sudo': 'become',
    'sudo_user': 'become_user',
    'su': 'become',
    'su_user': 'become_user',
    'with_items': 'loop',
    'with_list': 'loop',
    'always_run': 'check_mode',
    'include': 'include_tasks or import_tasks',
}

DEPRECATED_PLAY_KEYS = {
    'include': 'import_playbook',
}

# Keys that only accept a boolean
BOOLEAN_KEYS = frozenset([
    'any_errors_fatal', 'backup', 'become', 'cacheable', 'check_mode',
    'create', 'daemon_reload', 'delegate_facts', 'diff', 'enabled', 'follow',
    'force', 'gather_facts', 'ignore_errors', 'ignore_unreachable', 'no_log',
    'recurse', 'remote_src', 'run_once', 'update_cache', 'validate_certs',
])

# Keys whose values reference the local Ansible environment and stay bare
LOCAL_KEYS = frozenset([
    'changed_when', 'failed_when', 'index_var', 'loop_var', 'register',
    'that', 'until', 'when',
])

TRUE_LITERAL = 'true'
FALSE_LITERAL = 'false'

# YAML 1.1 spellings of booleans
BOOLEAN_WORDS = frozenset([
    'yes', 'Yes', 'YES', 'no', 'No', 'NO',
    'true', 'True', 'TRUE', 'false', 'False', 'FALSE',
    'on', 'On', 'ON', 'off', 'Off', 'OFF',
])

NULL_WORDS = frozenset(['', '~', 'null', 'Null', 'NULL'])
