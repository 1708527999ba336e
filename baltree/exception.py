
class BalancedTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class InvalidArgumentError(BalancedTreeError):
    def __str__(self):
        return "invalid argument: " + ''.join(map(str, self.args))

class NotFoundError(BalancedTreeError):
    def __init__(self, value):
        super(NotFoundError, self).__init__(value)
        self.value = value

    def __str__(self):
        return "value not found: " + str(self.value)
