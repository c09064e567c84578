# converts .ninja_log files into chrome traces
